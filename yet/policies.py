"""Download policies and ended reasons, with their lenient parsers."""

from collections.abc import Callable
from enum import Enum


class DownloadPolicy(str, Enum):
    """How many of a channel's or playlist's videos get downloaded."""

    RECENT = "recent"
    ALL = "all"


DEFAULT_DOWNLOAD_POLICY = DownloadPolicy.RECENT
RECENT_DOWNLOADS_LIMIT = 10


class VideoEndedReason(str, Enum):
    """Why a video was marked as ended."""

    COMPLETED = "completed"
    SKIPPED = "skipped"
    SEEN_ENOUGH = "seen-enough"


DEFAULT_ENDED_REASON = VideoEndedReason.COMPLETED


def parse_download_policy(policy: str) -> DownloadPolicy:
    """Return the matching policy, or the default one for unknown input."""
    try:
        return DownloadPolicy(policy)
    except ValueError:
        return DEFAULT_DOWNLOAD_POLICY


def all_download_policies() -> list[DownloadPolicy]:
    return list(DownloadPolicy)


def parse_video_ended_reason(s: str) -> VideoEndedReason:
    """Return the matching reason, or the default one for unknown input."""
    try:
        return VideoEndedReason(s)
    except ValueError:
        return DEFAULT_ENDED_REASON


def all_video_ended_reasons() -> list[VideoEndedReason]:
    return list(VideoEndedReason)


def _playlist_download_policies() -> list[str]:
    return [DownloadPolicy.RECENT.value, DownloadPolicy.ALL.value]


def _video_ended_reasons() -> list[str]:
    return [VideoEndedReason.SKIPPED.value, VideoEndedReason.SEEN_ENOUGH.value]


def value_delegates() -> dict[str, Callable[[], list[str]]]:
    """Named providers of allowed command-line values."""
    return {
        "playlist-download-policies": _playlist_download_policies,
        "video-ended-reasons": _video_ended_reasons,
    }