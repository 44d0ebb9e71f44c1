"""View model of the watch history, grouped by how long ago videos ended."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from yet import properties as p
from yet.redux import Redux
from yet.video_view_model import VideoOption, VideoViewModel, get_video_view_model

RECENT_GROUP = "Less than a week ago"
THIS_MONTH_GROUP = "Less than a month ago"
THIS_YEAR_GROUP = "Less than a year ago"
OLDER_GROUP = "More than a year ago"
ENDED_VIDEOS_LIMIT = 100

GROUPS_ORDER = [RECENT_GROUP, THIS_MONTH_GROUP, THIS_YEAR_GROUP, OLDER_GROUP]


@dataclass
class HistoryViewModel:
    title: str
    show_all: bool
    open_group: str = RECENT_GROUP
    groups_order: list[str] = field(default_factory=lambda: list(GROUPS_ORDER))
    groups: dict[str, list[VideoViewModel]] = field(default_factory=dict)


def _parse_rfc3339(ts: str) -> datetime | None:
    text = ts[:-1] + "+00:00" if ts.endswith(("Z", "z")) else ts
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return None
    return dt if dt.tzinfo is not None else None


def _group(ended: str | None, now: datetime) -> str:
    if not ended:
        return OLDER_GROUP
    dt = _parse_rfc3339(ended)
    if dt is None:
        return OLDER_GROUP
    days = (now - dt).total_seconds() / 3600 / 24
    if days <= 7:
        return RECENT_GROUP
    if days <= 30:
        return THIS_MONTH_GROUP
    if days <= 365:
        return THIS_YEAR_GROUP
    return OLDER_GROUP


def get_history_view_model(
    rdx: Redux, show_all: bool = False, now: datetime | None = None
) -> HistoryViewModel:
    """Ended videos by recency group, newest first, limited unless show_all."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.astimezone()

    ended_ids = rdx.keys(p.VIDEO_ENDED_DATE)

    if show_all:
        title = f"All {len(ended_ids)} watched videos"
    else:
        title = f"Last {ENDED_VIDEOS_LIMIT} watched videos (out of {len(ended_ids)})"

    hvm = HistoryViewModel(title=title, show_all=show_all)

    grouped: dict[str, list[str]] = {}
    for video_id in ended_ids:
        grp = _group(rdx.get_last_val(p.VIDEO_ENDED_DATE, video_id), now)
        grouped.setdefault(grp, []).append(video_id)

    written = 0
    for grp in GROUPS_ORDER:
        if written == ENDED_VIDEOS_LIMIT and not show_all:
            break
        ids = grouped.get(grp)
        if not ids:
            continue
        for video_id in rdx.sort(ids, True, p.VIDEO_ENDED_DATE):
            if written == ENDED_VIDEOS_LIMIT and not show_all:
                break
            hvm.groups.setdefault(grp, []).append(
                get_video_view_model(
                    video_id, rdx, VideoOption.SHOW_ENDED_DATE, VideoOption.SHOW_POSTER
                )
            )
            written += 1

    return hvm