"""Parsing of video and playlist ids from bare ids and URLs."""

from urllib.parse import parse_qs, urlparse

_YOUTU_BE_HOST = "youtu.be/"
_YOUTUBE_EMBED_URL = "youtube.com/embed"


class InvalidIdError(ValueError):
    """Raised when an input is neither a known id form nor a supported URL."""


def _path_base(path: str) -> str:
    """Last element of a slash-separated path, ignoring trailing slashes."""
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _query_param(url: str, name: str) -> str:
    try:
        query = parse_qs(urlparse(url).query)
    except ValueError as err:
        raise InvalidIdError(str(err)) from err
    values = query.get(name)
    if not values or not values[0]:
        raise InvalidIdError(f"{url} has no {name} parameter")
    return values[0]


def parse_video_ids(*args: str) -> list[str]:
    """Turn video-ids, /watch, youtu.be/ and embed URLs into video-ids, in order."""
    video_ids: list[str] = []
    for url_or_id in args:
        if not url_or_id:
            continue
        if len(url_or_id) < 12:
            # video-ids are exactly 11 characters, any URL holding one is longer
            video_ids.append(url_or_id)
        elif _YOUTU_BE_HOST in url_or_id:
            try:
                video_ids.append(_path_base(urlparse(url_or_id).path))
            except ValueError:
                pass
        elif _YOUTUBE_EMBED_URL in url_or_id:
            try:
                video_ids.append(_path_base(urlparse(url_or_id).path))
            except ValueError as err:
                raise InvalidIdError(str(err)) from err
        elif "v=" in url_or_id:
            video_ids.append(_query_param(url_or_id, "v"))
        else:
            raise InvalidIdError(f"{url_or_id} is not a valid video-id input")
    return video_ids


def parse_video_id(video_id: str) -> str:
    """Parse a single video-id input, failing when nothing is found."""
    parsed = parse_video_ids(video_id)
    if not parsed:
        raise InvalidIdError(f"invalid video id: {video_id}")
    return parsed[0]


def parse_playlist_ids(*args: str) -> list[str]:
    """Turn playlist-ids (PL..., UU...) and URLs with list= into playlist-ids."""
    playlist_ids: list[str] = []
    for url_or_id in args:
        if not url_or_id:
            continue
        if url_or_id.startswith(("PL", "UU")):
            playlist_ids.append(url_or_id)
        elif "list=" in url_or_id:
            playlist_ids.append(_query_param(url_or_id, "list"))
        else:
            raise InvalidIdError(f"{url_or_id} is not a valid playlist-id input")
    return playlist_ids


def parse_playlist_id(playlist_id: str) -> str:
    """Parse a single playlist-id input, failing when nothing is found."""
    parsed = parse_playlist_ids(playlist_id)
    if not parsed:
        raise InvalidIdError(f"invalid playlist id: {playlist_id}")
    return parsed[0]