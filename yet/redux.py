"""A small persistent store of property -> key -> values, one JSON file per property."""

import json
import os
from collections.abc import Iterable, Mapping
from pathlib import Path


class MissingPropertyError(LookupError):
    """Raised when a property was not loaded into the store."""

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__("redux is missing properties: " + ", ".join(self.missing))


class Redux:
    """Multi-valued metadata for a fixed set of properties, persisted to a directory."""

    def __init__(self, directory: str | os.PathLike, properties: Iterable[str]):
        self.directory = Path(directory)
        self._data: dict[str, dict[str, list[str]]] = {}
        self._stamps: dict[str, tuple[int, int] | None] = {}
        for prop in dict.fromkeys(properties):
            self._load(prop)

    def _path(self, prop: str) -> Path:
        return self.directory / f"{prop}.json"

    def _stamp(self, prop: str) -> tuple[int, int] | None:
        try:
            st = self._path(prop).stat()
        except FileNotFoundError:
            return None
        return st.st_mtime_ns, st.st_size

    def _load(self, prop: str) -> None:
        try:
            raw = json.loads(self._path(prop).read_text(encoding="utf-8"))
        except FileNotFoundError:
            raw = {}
        self._data[prop] = {str(k): [str(v) for v in vs] for k, vs in raw.items()}
        self._stamps[prop] = self._stamp(prop)

    def _save(self, prop: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(prop)
        tmp = path.with_name(path.name + ".tmp")
        tmp.write_text(json.dumps(self._data[prop], ensure_ascii=False), encoding="utf-8")
        os.replace(tmp, path)
        self._stamps[prop] = self._stamp(prop)

    def _values(self, prop: str) -> dict[str, list[str]]:
        try:
            return self._data[prop]
        except KeyError:
            raise MissingPropertyError([prop]) from None

    def keys(self, prop: str) -> list[str]:
        return list(self._values(prop))

    def has_key(self, prop: str, key: str) -> bool:
        return key in self._values(prop)

    def has_value(self, prop: str, key: str, value: str) -> bool:
        return value in self._values(prop).get(key, ())

    def get_last_val(self, prop: str, key: str) -> str | None:
        """The last value of a key, or None when the key has no values."""
        values = self._values(prop).get(key)
        return values[-1] if values else None

    def get_all_values(self, prop: str, key: str) -> list[str] | None:
        """A copy of the key's values, or None when the key is absent."""
        values = self._values(prop).get(key)
        return None if values is None else list(values)

    def _add(self, data: dict[str, list[str]], key: str, values: Iterable[str]) -> bool:
        current = data.setdefault(key, [])
        changed = False
        for v in values:
            if v not in current:
                current.append(v)
                changed = True
        return changed

    def add_values(self, prop: str, key: str, *values: str) -> None:
        """Append values that the key does not hold yet."""
        data = self._values(prop)
        created = key not in data
        if self._add(data, key, values) or created:
            self._save(prop)

    def replace_values(self, prop: str, key: str, *values: str) -> None:
        self._values(prop)[key] = list(values)
        self._save(prop)

    def batch_add_values(self, prop: str, key_values: Mapping[str, Iterable[str]]) -> None:
        data = self._values(prop)
        changed = False
        for key, values in key_values.items():
            created = key not in data
            changed = self._add(data, key, values) or created or changed
        if changed:
            self._save(prop)

    def batch_replace_values(self, prop: str, key_values: Mapping[str, Iterable[str]]) -> None:
        data = self._values(prop)
        for key, values in key_values.items():
            data[key] = list(values)
        if key_values:
            self._save(prop)

    def cut_keys(self, prop: str, *keys: str) -> None:
        data = self._values(prop)
        removed = [k for k in keys if data.pop(k, None) is not None]
        if removed:
            self._save(prop)

    def must_have(self, *properties: str) -> None:
        missing = [p for p in properties if p not in self._data]
        if missing:
            raise MissingPropertyError(missing)

    def refresh(self) -> "Redux":
        """Reload properties whose files changed on disk since they were read."""
        for prop in self._data:
            if self._stamp(prop) != self._stamps.get(prop):
                self._load(prop)
        return self

    def sort(self, ids: Iterable[str], desc: bool, *properties: str) -> list[str]:
        """Order ids by the last values of the given properties, in turn."""
        for prop in properties:
            self._values(prop)

        def sort_key(item_id: str) -> tuple[str, ...]:
            return tuple(self.get_last_val(p, item_id) or "" for p in properties)

        return sorted(ids, key=sort_key, reverse=desc)

    def match_asset(self, prop: str, terms: Iterable[str]) -> list[str]:
        """Keys whose values include every one of the terms."""
        wanted = list(terms)
        return [k for k, vs in self._values(prop).items() if all(t in vs for t in wanted)]


def open_redux(directory: str | os.PathLike, *properties: str) -> Redux:
    """Open a store in directory holding the given properties."""
    Path(directory).mkdir(parents=True, exist_ok=True)
    rdx = Redux(directory, properties)
    rdx.must_have(*properties)
    return rdx