"""Removal of accumulated video properties that are no longer needed."""

from yet import properties as p
from yet.redux import Redux

PRESERVE_VIDEO_PROPERTIES = (
    p.VIDEO_TITLE,  # history
    p.VIDEO_OWNER_CHANNEL_NAME,  # cleanup of empty video directories
    p.VIDEO_ENDED_DATE,  # cleanup
    p.VIDEO_ENDED_REASON,  # history
    p.VIDEO_FAVORITE,  # cleanup
    p.VIDEO_DOWNLOAD_COMPLETED,  # cleanup
    p.VIDEO_DOWNLOAD_CLEANED_UP,  # cleanup
    p.VIDEO_EXTERNAL_CHANNEL_ID,  # watch
)


def _scrubbable() -> list[str]:
    return [vp for vp in p.video_properties() if vp not in PRESERVE_VIDEO_PROPERTIES]


def scrub_ended_properties(rdx: Redux) -> None:
    """Remove every non-preserved property of ended videos."""
    rdx.must_have(*p.video_properties())
    rdx.refresh()

    ended = rdx.keys(p.VIDEO_ENDED_DATE)
    for vp in _scrubbable():
        present = [video_id for video_id in ended if rdx.has_key(vp, video_id)]
        if present:
            rdx.cut_keys(vp, *present)


def scrub_deposition_properties(rdx: Redux) -> None:
    """Remove non-preserved properties of videos that are no longer current.

    Current videos are downloaded, not ended ones and those listed by
    auto-refreshing channels and playlists.
    """
    rdx.must_have(*p.all_properties())
    rdx.refresh()

    current = {
        video_id
        for video_id in rdx.keys(p.VIDEO_DOWNLOAD_COMPLETED)
        if not rdx.has_key(p.VIDEO_ENDED_DATE, video_id)
    }
    for channel_id in rdx.keys(p.CHANNEL_AUTO_REFRESH):
        current.update(rdx.get_all_values(p.CHANNEL_VIDEOS, channel_id) or ())
    for playlist_id in rdx.keys(p.PLAYLIST_AUTO_REFRESH):
        current.update(rdx.get_all_values(p.PLAYLIST_VIDEOS, playlist_id) or ())

    for vp in _scrubbable():
        stale = [video_id for video_id in rdx.keys(vp) if video_id not in current]
        if stale:
            rdx.cut_keys(vp, *stale)