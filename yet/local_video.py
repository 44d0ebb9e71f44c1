"""Local video file names, yt-dlp binary names and timestamps."""

import os
import re
import sys
from datetime import datetime, timedelta
from pathlib import Path

DEFAULT_VIDEO_EXT = ".mp4"
DEFAULT_DELAY = timedelta(hours=24)

_GLOB_TEMPLATE = "*/*-{video_id}" + DEFAULT_VIDEO_EXT

_YT_DLP_ASSETS = {
    "darwin": "yt-dlp_macos",
    "linux": "yt-dlp_linux",
    "windows": "yt-dlp.exe",
    "win32": "yt-dlp.exe",
}

_UNSAFE_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


class AmbiguousVideoError(LookupError):
    """Raised when several local files match one video-id."""


def sanitize(s: str) -> str:
    """Remove characters that are unsafe in file names."""
    return _UNSAFE_CHARS.sub("", s).strip()


def rel_local_video_filename(channel: str, title: str, video_id: str) -> str:
    """channel/title-video-id.mp4, dropping the parts that are not known."""
    channel = sanitize(channel)
    title = sanitize(title)
    name = f"{title}-{video_id}" if title else video_id
    if channel:
        name = os.path.join(channel, name)
    return name + DEFAULT_VIDEO_EXT


def locate_local_video(videos_dir: str | os.PathLike, video_id: str) -> Path:
    """Find the single local file for a video-id, whatever title it was saved under."""
    pattern = _GLOB_TEMPLATE.format(video_id=video_id)
    matches = sorted(Path(videos_dir).glob(pattern))
    if not matches:
        raise FileNotFoundError(f"no local file for video-id {video_id}")
    if len(matches) > 1:
        raise AmbiguousVideoError("several local files match video-id " + video_id)
    return matches[0]


def yt_dlp_binary(platform_name: str | None = None) -> str:
    """Name of the yt-dlp release asset for the platform."""
    name = sys.platform if platform_name is None else platform_name
    try:
        return _YT_DLP_ASSETS[name]
    except KeyError:
        raise RuntimeError("yet is only supported on Windows, macOS and Linux") from None


def fmt_now(now: datetime | None = None) -> str:
    """RFC 3339 timestamp to the second, 'Z' for UTC."""
    moment = (now or datetime.now()).astimezone()
    if moment.tzinfo is None and now is not None:
        moment = now.astimezone()
    text = moment.replace(microsecond=0).isoformat()
    if moment.utcoffset() == timedelta(0):
        text = text[: -len("+00:00")] + "Z"
    return text