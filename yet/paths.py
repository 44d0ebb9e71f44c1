"""Directory layout of the data root and paths of stored files."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

DEFAULT_YET_ROOT_DIR = "/usr/share/yet"

DEFAULT_THUMBNAIL_EXT = ".jpg"

_COOKIES_FILENAME = "cookies.txt"
_CAPTIONS_EXT = ".ytt"
_SCRIPT_EXT = ".js"
_N_PARAM_DECODER_SFX = "-n"
_SIGNATURE_CIPHER_DECODER_SFX = "-signatureCipher"


class AbsDir(str, Enum):
    """Directories kept under the data root."""

    BACKUPS = "backups"
    INPUT = "input"
    METADATA = "metadata"
    VIDEOS = "videos"
    POSTERS = "posters"
    CAPTIONS = "captions"
    PLAYERS = "players"
    YT_DLP = "yt-dlp"


class ThumbnailQuality(str, Enum):
    """Poster qualities, from highest to lowest."""

    MAX_RES = "maxresdefault"
    SD = "sddefault"
    HQ = "hqdefault"
    MQ = "mqdefault"
    DEFAULT = "default"


@dataclass(frozen=True)
class Layout:
    """Resolves data directories under a root, with optional per-directory overrides."""

    root: Path = Path(DEFAULT_YET_ROOT_DIR)
    overrides: dict[AbsDir, Path] = field(default_factory=dict)

    def abs_dir(self, d: AbsDir | str) -> Path:
        d = AbsDir(d)
        if d in self.overrides:
            return Path(self.overrides[d])
        return Path(self.root) / d.value

    def ensure(self) -> None:
        """Create every data directory that does not exist yet."""
        for d in AbsDir:
            self.abs_dir(d).mkdir(parents=True, exist_ok=True)

    def abs_cookies_path(self) -> Path:
        return self.abs_dir(AbsDir.INPUT) / _COOKIES_FILENAME

    def abs_poster_path(self, video_id: str, quality: ThumbnailQuality | str) -> Path:
        """posters/<first letter>/<second letter>/<video-id>/<quality>.jpg"""
        quality = ThumbnailQuality(quality)
        sub = self._video_id_dir(self.abs_dir(AbsDir.POSTERS), video_id)
        return sub / (quality.value + DEFAULT_THUMBNAIL_EXT)

    def abs_captions_track_path(self, video_id: str, lang: str) -> Path:
        """captions/<first>/<second>/<video-id>/<video-id>_<lang>.ytt"""
        sub = self._video_id_dir(self.abs_dir(AbsDir.CAPTIONS), video_id)
        return sub / f"{video_id}_{lang}{_CAPTIONS_EXT}"

    def abs_player_path(self, version: str) -> Path:
        return self.abs_dir(AbsDir.PLAYERS) / (version + _SCRIPT_EXT)

    def abs_n_param_decoder_path(self, version: str) -> Path:
        return self.abs_dir(AbsDir.PLAYERS) / (version + _N_PARAM_DECODER_SFX + _SCRIPT_EXT)

    def abs_signature_cipher_decoder_path(self, version: str) -> Path:
        return self.abs_dir(AbsDir.PLAYERS) / (
            version + _SIGNATURE_CIPHER_DECODER_SFX + _SCRIPT_EXT
        )

    @staticmethod
    def _video_id_dir(base: Path, video_id: str) -> Path:
        if len(video_id) < 2:
            raise ValueError("video-id is too short to construct sub-path")
        sub = base / video_id[0] / video_id[1] / video_id
        sub.mkdir(parents=True, exist_ok=True)
        return sub