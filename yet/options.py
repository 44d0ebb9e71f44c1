"""Options for adding, removing and downloading channels, playlists and videos."""

from dataclasses import dataclass

from yet import properties as p
from yet.policies import (
    DEFAULT_DOWNLOAD_POLICY,
    DEFAULT_ENDED_REASON,
    DownloadPolicy,
    VideoEndedReason,
)
from yet.redux import Redux


@dataclass
class ChannelOptions:
    playlists: bool = False
    auto_refresh: bool = False
    auto_download: bool = False
    download_policy: DownloadPolicy = DEFAULT_DOWNLOAD_POLICY
    expand: bool = False
    force: bool = False


@dataclass
class PlaylistOptions:
    auto_refresh: bool = False
    auto_download: bool = False
    download_policy: DownloadPolicy = DEFAULT_DOWNLOAD_POLICY
    expand: bool = False
    force: bool = False


@dataclass
class VideoOptions:
    favorite: bool = False
    download_queue: bool = False
    progress: bool = False
    ended: bool = False
    reason: VideoEndedReason = DEFAULT_ENDED_REASON
    force: bool = False


def apply_video_download_options(opt: VideoOptions, video_id: str, rdx: Redux) -> VideoOptions:
    """Turn on forcing when the video is marked for forced download."""
    if rdx.get_last_val(p.VIDEO_FORCED_DOWNLOAD, video_id) == p.TRUE_VALUE:
        opt.force = True
    return opt