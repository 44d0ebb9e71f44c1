"""Selection of the next video to download from the download queue."""

from datetime import datetime, timezone

from yet import properties as p
from yet.local_video import DEFAULT_DELAY
from yet.redux import Redux

MAX_ATTEMPTS = 2


def _parse_rfc3339(ts: str) -> datetime:
    text = ts[:-1] + "+00:00" if ts.endswith(("Z", "z")) else ts
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        raise ValueError(f"timestamp {ts!r} has no time zone offset")
    return dt


def next_queued_download(
    rdx: Redux, force: bool = False, now: datetime | None = None
) -> str | None:
    """The first queued video that should be downloaded now, or None.

    Videos that ended after they were queued are removed from the queue unless
    force is set. Videos completed after queue time are skipped unless force is
    set, and those started after queue time within the delay are skipped.
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.astimezone()

    rdx.refresh()

    for video_id in rdx.keys(p.VIDEO_DOWNLOAD_QUEUED):
        queued = rdx.get_last_val(p.VIDEO_DOWNLOAD_QUEUED, video_id) or ""

        ended = rdx.get_last_val(p.VIDEO_ENDED_DATE, video_id)
        if ended is not None and ended > queued and not force:
            rdx.cut_keys(p.VIDEO_DOWNLOAD_QUEUED, video_id)
            continue

        completed = rdx.get_last_val(p.VIDEO_DOWNLOAD_COMPLETED, video_id)
        if completed is not None and completed > queued and not force:
            continue

        started = rdx.get_last_val(p.VIDEO_DOWNLOAD_STARTED, video_id)
        if started is not None and started > queued:
            if now - _parse_rfc3339(started) < DEFAULT_DELAY:
                continue

        return video_id

    return None