"""Removal of downloaded files of videos that have ended."""

import os
from datetime import datetime, timezone
from pathlib import Path

from yet import properties as p
from yet.local_video import DEFAULT_DELAY, fmt_now, locate_local_video, sanitize
from yet.paths import AbsDir, Layout, ThumbnailQuality
from yet.redux import Redux


def _parse_rfc3339(ts: str) -> datetime:
    text = ts[:-1] + "+00:00" if ts.endswith(("Z", "z")) else ts
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        raise ValueError(f"timestamp {ts!r} has no time zone offset")
    return dt


def directory_is_empty(path: str | os.PathLike) -> bool:
    """True when the directory holds no entries; OSError when it cannot be read."""
    with os.scandir(path) as entries:
        return next(entries, None) is None


def _is_due(rdx: Redux, video_id: str, now: bool, moment: datetime) -> bool:
    if rdx.has_key(p.VIDEO_FAVORITE, video_id):
        return False

    completed = rdx.get_last_val(p.VIDEO_DOWNLOAD_COMPLETED, video_id) or ""
    cleaned = rdx.get_last_val(p.VIDEO_DOWNLOAD_CLEANED_UP, video_id)
    # already cleaned up after the latest download
    if cleaned is not None and cleaned > completed:
        return False

    if not now:
        ended = rdx.get_last_val(p.VIDEO_ENDED_DATE, video_id)
        if ended is not None and moment - _parse_rfc3339(ended) < DEFAULT_DELAY:
            return False

    return True


def _remove_video_file(rdx: Redux, videos_dir: Path, video_id: str) -> None:
    title = rdx.get_last_val(p.VIDEO_TITLE, video_id)
    channel = rdx.get_last_val(p.VIDEO_OWNER_CHANNEL_NAME, video_id)
    if not title or not channel:
        return
    try:
        path = locate_local_video(videos_dir, video_id)
    except FileNotFoundError:
        return
    path.unlink(missing_ok=True)


def _remove_posters(layout: Layout, video_id: str) -> None:
    for quality in ThumbnailQuality:
        layout.abs_poster_path(video_id, quality).unlink(missing_ok=True)


def _remove_empty_channel_dir(rdx: Redux, videos_dir: Path, video_id: str) -> None:
    channel = rdx.get_last_val(p.VIDEO_OWNER_CHANNEL_NAME, video_id)
    if not channel:
        return
    name = sanitize(channel)
    if not name:
        return
    channel_dir = videos_dir / name
    try:
        empty = directory_is_empty(channel_dir)
    except OSError:
        return
    if empty:
        channel_dir.rmdir()


def cleanup_ended_videos(
    rdx: Redux, layout: Layout | None = None, now: bool = False
) -> list[str]:
    """Remove files and posters of ended, non-favorite videos; return their ids.

    Videos cleaned up after their latest download are skipped, and unless now
    is set, so are videos that ended less than the default delay ago.
    """
    layout = layout or Layout()
    rdx.must_have(*p.video_properties())
    rdx.refresh()

    videos_dir = layout.abs_dir(AbsDir.VIDEOS)
    moment = datetime.now(timezone.utc)

    due = [
        video_id
        for video_id in rdx.keys(p.VIDEO_ENDED_DATE)
        if _is_due(rdx, video_id, now, moment)
    ]

    for video_id in due:
        _remove_video_file(rdx, videos_dir, video_id)
        _remove_posters(layout, video_id)
        rdx.add_values(p.VIDEO_DOWNLOAD_CLEANED_UP, video_id, fmt_now())
        _remove_empty_channel_dir(rdx, videos_dir, video_id)

    return due