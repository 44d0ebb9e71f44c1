"""View models of a video error page and of video management."""

from dataclasses import dataclass, field

from yet import properties as p
from yet.policies import (
    DEFAULT_ENDED_REASON,
    VideoEndedReason,
    all_video_ended_reasons,
    parse_video_ended_reason,
)
from yet.redux import Redux


@dataclass
class VideoErrorViewModel:
    video_id: str
    video_title: str
    error: str


@dataclass
class VideoManagementViewModel:
    video_id: str
    video_title: str
    current_time: str
    favorite: bool
    progress: bool
    ended: bool
    ended_reason: VideoEndedReason
    all_ended_reasons: list[VideoEndedReason] = field(default_factory=all_video_ended_reasons)
    download_queued: bool = False
    forced_download: bool = False


def get_video_error_view_model(video_id: str, error: str, rdx: Redux) -> VideoErrorViewModel:
    video_title = rdx.get_last_val(p.VIDEO_TITLE, video_id) or video_id
    return VideoErrorViewModel(video_id=video_id, video_title=video_title, error=error)


def get_video_management_view_model(video_id: str, rdx: Redux) -> VideoManagementViewModel:
    """State of a video's user-managed properties."""
    ended_reason = DEFAULT_ENDED_REASON
    er = rdx.get_last_val(p.VIDEO_ENDED_REASON, video_id)
    if er:
        ended_reason = parse_video_ended_reason(er)

    download_queued = False
    queued = rdx.get_last_val(p.VIDEO_DOWNLOAD_QUEUED, video_id)
    if queued is not None:
        download_queued = True
        completed = rdx.get_last_val(p.VIDEO_DOWNLOAD_COMPLETED, video_id)
        if completed is not None and queued < completed:
            download_queued = False

    return VideoManagementViewModel(
        video_id=video_id,
        video_title=rdx.get_last_val(p.VIDEO_TITLE, video_id) or "",
        current_time=rdx.get_last_val(p.VIDEO_PROGRESS, video_id) or "",
        favorite=rdx.has_key(p.VIDEO_FAVORITE, video_id),
        progress=rdx.has_key(p.VIDEO_PROGRESS, video_id),
        ended=rdx.has_key(p.VIDEO_ENDED_DATE, video_id),
        ended_reason=ended_reason,
        all_ended_reasons=all_video_ended_reasons(),
        download_queued=download_queued,
        forced_download=rdx.has_key(p.VIDEO_FORCED_DOWNLOAD, video_id),
    )