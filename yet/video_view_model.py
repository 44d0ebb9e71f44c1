"""View model of a single video as it is shown in lists and pages."""

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto

from yet import properties as p
from yet.policies import DEFAULT_ENDED_REASON, VideoEndedReason, parse_video_ended_reason
from yet.redux import Redux

_INT_RE = re.compile(r"[+-]?\d+")
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class VideoOption(Enum):
    """Parts of a video that a view chooses to show."""

    SHOW_POSTER = auto()
    SHOW_PUBLISHED_DATE = auto()
    SHOW_ENDED_DATE = auto()
    SHOW_PROGRESS = auto()
    SHOW_DURATION = auto()
    SHOW_OWNER_CHANNEL = auto()
    SHOW_VIEW_COUNT = auto()


@dataclass
class VideoViewModel:
    video_id: str
    video_url: str
    video_title: str
    favorite: bool
    show_poster: bool
    show_published_date: bool
    published_date: str
    downloaded_date: str
    show_ended_time: bool
    ended_time: str
    ended_reason: VideoEndedReason
    show_duration: bool
    duration: str
    show_progress: bool
    current_time_seconds: str
    duration_seconds: str
    show_owner_channel: bool
    owner_channel: str
    show_view_count: bool
    view_count: str


def _parse_int(s: str) -> int | None:
    return int(s) if _INT_RE.fullmatch(s) else None


def _parse_rfc3339(ts: str) -> datetime | None:
    text = ts[:-1] + "+00:00" if ts.endswith(("Z", "z")) else ts
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return None
    return dt if dt.tzinfo is not None else None


def parse_and_format(ts: str) -> str:
    """Render an RFC 3339 timestamp in local time, RFC 1123 style; other text is kept."""
    dt = _parse_rfc3339(ts)
    if dt is None:
        return ts
    local = dt.astimezone()
    return (
        f"{_WEEKDAYS[local.weekday()]}, {local.day:02d} {_MONTHS[local.month - 1]} "
        f"{local.year:04d} {local.hour:02d}:{local.minute:02d}:{local.second:02d} "
        f"{local.tzname() or ''}"
    ).rstrip()


def format_seconds(ts: int) -> str:
    """m:ss below an hour, hh:mm:ss otherwise; 'unknown' for zero."""
    if ts == 0:
        return "unknown"
    secs = ts % 86400
    hour, rest = divmod(secs, 3600)
    minute, second = divmod(rest, 60)
    if hour > 0:
        return f"{hour:02d}:{minute:02d}:{second:02d}"
    return f"{minute}:{second:02d}"


def _non_empty(rdx: Redux, prop: str, key: str) -> str:
    return rdx.get_last_val(prop, key) or ""


def get_video_view_model(video_id: str, rdx: Redux, *options: VideoOption) -> VideoViewModel:
    """Build the view model of a video, filling only what the options ask for."""
    video_title = _non_empty(rdx, p.VIDEO_TITLE, video_id) or video_id

    video_url = "/watch?"
    if video_id:
        video_url += "v=" + video_id

    show_published = VideoOption.SHOW_PUBLISHED_DATE in options
    published_date = ""
    downloaded_date = ""
    if show_published:
        pds = _non_empty(rdx, p.VIDEO_PUBLISH_DATE, video_id)
        if pds:
            published_date = parse_and_format(pds)
        else:
            published_date = _non_empty(rdx, p.VIDEO_PUBLISH_TIME_TEXT, video_id)
        dts = _non_empty(rdx, p.VIDEO_DOWNLOAD_COMPLETED, video_id)
        if dts:
            downloaded_date = parse_and_format(dts)

    show_owner = VideoOption.SHOW_OWNER_CHANNEL in options
    owner_channel = _non_empty(rdx, p.VIDEO_OWNER_CHANNEL_NAME, video_id) if show_owner else ""

    show_ended = VideoOption.SHOW_ENDED_DATE in options
    ets = _non_empty(rdx, p.VIDEO_ENDED_DATE, video_id)
    ended_date = parse_and_format(ets) if ets else ""

    show_duration = VideoOption.SHOW_DURATION in options
    show_progress = VideoOption.SHOW_PROGRESS in options

    dur = 0
    rem = 0
    if show_duration or show_progress:
        durs = _non_empty(rdx, p.VIDEO_DURATION, video_id)
        parsed = _parse_int(durs) if durs else None
        if parsed is not None:
            dur = parsed

    if show_progress:
        ct = 0
        cts = _non_empty(rdx, p.VIDEO_PROGRESS, video_id)
        parsed = _parse_int(cts) if cts else None
        if parsed is not None:
            ct = parsed
        rem = dur - ct

    show_view_count = VideoOption.SHOW_VIEW_COUNT in options
    view_count = _non_empty(rdx, p.VIDEO_VIEW_COUNT, video_id) if show_view_count else ""

    ended_reason = DEFAULT_ENDED_REASON
    er = rdx.get_last_val(p.VIDEO_ENDED_REASON, video_id)
    if er is not None:
        ended_reason = parse_video_ended_reason(er)

    return VideoViewModel(
        video_id=video_id,
        video_url=video_url,
        video_title=video_title,
        favorite=rdx.has_key(p.VIDEO_FAVORITE, video_id),
        show_poster=VideoOption.SHOW_POSTER in options,
        show_published_date=show_published,
        published_date=published_date,
        downloaded_date=downloaded_date,
        show_ended_time=show_ended,
        ended_time=ended_date,
        ended_reason=ended_reason,
        show_duration=show_duration and dur > 0,
        duration=format_seconds(dur),
        show_progress=show_progress and rem > 0 and dur > 0,
        current_time_seconds=str(dur - rem),
        duration_seconds=str(dur),
        show_owner_channel=show_owner,
        owner_channel=owner_channel,
        show_view_count=show_view_count,
        view_count=view_count,
    )