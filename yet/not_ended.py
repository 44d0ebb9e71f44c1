"""Selection of a channel's or playlist's videos that have not ended yet."""

from yet import properties as p
from yet.policies import (
    DEFAULT_DOWNLOAD_POLICY,
    RECENT_DOWNLOADS_LIMIT,
    DownloadPolicy,
    parse_download_policy,
)
from yet.redux import Redux


def channel_not_ended_videos(channel_id: str, rdx: Redux) -> list[str]:
    return _not_ended_videos(channel_id, p.CHANNEL_VIDEOS, p.CHANNEL_DOWNLOAD_POLICY, rdx)


def playlist_not_ended_videos(playlist_id: str, rdx: Redux) -> list[str]:
    return _not_ended_videos(playlist_id, p.PLAYLIST_VIDEOS, p.PLAYLIST_DOWNLOAD_POLICY, rdx)


def _not_ended_videos(
    item_id: str, videos_property: str, policy_property: str, rdx: Redux
) -> list[str]:
    videos = rdx.get_all_values(videos_property, item_id)
    if videos is None:
        return []

    policy = DEFAULT_DOWNLOAD_POLICY
    stored = rdx.get_last_val(policy_property, item_id)
    if stored is not None:
        policy = parse_download_policy(stored)

    considered = videos if policy is DownloadPolicy.ALL else videos[:RECENT_DOWNLOADS_LIMIT]
    return [v for v in considered if not rdx.has_key(p.VIDEO_ENDED_DATE, v)]