"""View model of the main list page: continue, downloads, channels, playlists, favorites."""

from dataclasses import dataclass, field

from yet import properties as p
from yet.collection_view_models import (
    ChannelViewModel,
    PlaylistViewModel,
    get_channel_view_model,
    get_playlist_view_model,
)
from yet.not_ended import channel_not_ended_videos, playlist_not_ended_videos
from yet.redux import MissingPropertyError, Redux
from yet.video_view_model import VideoOption, VideoViewModel, get_video_view_model

NEW_ITEMS = "New"
NO_NEW_ITEMS = "Watched"

_GROUPS_ORDER = (NEW_ITEMS, NO_NEW_ITEMS)


@dataclass
class ListViewModel:
    continue_videos: list[VideoViewModel] = field(default_factory=list)
    videos: list[VideoViewModel] = field(default_factory=list)
    downloads: list[VideoViewModel] = field(default_factory=list)
    channels_order: list[str] = field(default_factory=lambda: list(_GROUPS_ORDER))
    channels: dict[str, list[ChannelViewModel]] = field(default_factory=dict)
    playlists_order: list[str] = field(default_factory=lambda: list(_GROUPS_ORDER))
    playlists: dict[str, list[PlaylistViewModel]] = field(default_factory=dict)
    favorites: list[VideoViewModel] = field(default_factory=list)
    has_history: bool = False


def _videos_progress(rdx: Redux) -> list[str]:
    """Videos with progress that have not ended, by title."""
    ids = [
        video_id
        for video_id in rdx.keys(p.VIDEO_PROGRESS)
        if not rdx.get_last_val(p.VIDEO_ENDED_DATE, video_id)
    ]
    return rdx.sort(ids, False, p.VIDEO_TITLE)


def _in_auto_refreshing(rdx: Redux, video_id: str) -> bool:
    if any(
        rdx.has_value(p.CHANNEL_VIDEOS, channel_id, video_id)
        for channel_id in rdx.keys(p.CHANNEL_AUTO_REFRESH)
    ):
        return True
    return any(
        rdx.has_value(p.PLAYLIST_VIDEOS, playlist_id, video_id)
        for playlist_id in rdx.keys(p.PLAYLIST_AUTO_REFRESH)
    )


def _video_downloads(rdx: Redux) -> list[str]:
    """Downloaded videos that are not ended, in progress, favorite or auto-refreshed."""
    ids = [
        video_id
        for video_id in rdx.keys(p.VIDEO_DOWNLOAD_COMPLETED)
        if not rdx.has_key(p.VIDEO_ENDED_DATE, video_id)
        and not rdx.has_key(p.VIDEO_PROGRESS, video_id)
        and not rdx.has_key(p.VIDEO_FAVORITE, video_id)
        and not _in_auto_refreshing(rdx, video_id)
    ]
    return rdx.sort(ids, False, p.VIDEO_TITLE)


def _split_by_news(rdx, ids, has_news, *sort_properties) -> dict[str, list[str]]:
    if not ids:
        return {}
    new, no_new = [], []
    for item_id in ids:
        (new if has_news(item_id, rdx) else no_new).append(item_id)
    return {
        NEW_ITEMS: rdx.sort(new, False, *sort_properties),
        NO_NEW_ITEMS: rdx.sort(no_new, False, *sort_properties),
    }


def _queued_downloads(rdx: Redux) -> list[str]:
    """Queued videos whose download did not complete after they were queued."""
    ids = []
    for video_id in rdx.keys(p.VIDEO_DOWNLOAD_QUEUED):
        queued = rdx.get_last_val(p.VIDEO_DOWNLOAD_QUEUED, video_id) or ""
        completed = rdx.get_last_val(p.VIDEO_DOWNLOAD_COMPLETED, video_id)
        if completed is not None and completed > queued:
            continue
        ids.append(video_id)
    return rdx.sort(ids, False, p.VIDEO_TITLE)


def get_list_view_model(rdx: Redux) -> ListViewModel:
    """Build the list page view model from the store."""
    lvm = ListViewModel()

    lvm.continue_videos = [
        get_video_view_model(
            video_id,
            rdx,
            VideoOption.SHOW_POSTER,
            VideoOption.SHOW_PUBLISHED_DATE,
            VideoOption.SHOW_DURATION,
            VideoOption.SHOW_PROGRESS,
        )
        for video_id in _videos_progress(rdx)
    ]

    lvm.videos = [
        get_video_view_model(
            video_id,
            rdx,
            VideoOption.SHOW_POSTER,
            VideoOption.SHOW_PUBLISHED_DATE,
            VideoOption.SHOW_DURATION,
        )
        for video_id in _video_downloads(rdx)
    ]

    try:
        channel_groups = _split_by_news(
            rdx, rdx.keys(p.CHANNEL_AUTO_REFRESH), channel_not_ended_videos, p.CHANNEL_TITLE
        )
    except MissingPropertyError:
        channel_groups = {}
    for group in _GROUPS_ORDER:
        for channel_id in channel_groups.get(group, []):
            lvm.channels.setdefault(group, []).append(get_channel_view_model(channel_id, rdx))

    try:
        playlist_groups = _split_by_news(
            rdx,
            rdx.keys(p.PLAYLIST_AUTO_REFRESH),
            playlist_not_ended_videos,
            p.PLAYLIST_TITLE,
            p.PLAYLIST_CHANNEL,
        )
    except MissingPropertyError:
        playlist_groups = {}
    for group in _GROUPS_ORDER:
        for playlist_id in playlist_groups.get(group, []):
            lvm.playlists.setdefault(group, []).append(get_playlist_view_model(playlist_id, rdx))

    lvm.downloads = [
        get_video_view_model(
            video_id,
            rdx,
            VideoOption.SHOW_POSTER,
            VideoOption.SHOW_DURATION,
            VideoOption.SHOW_PUBLISHED_DATE,
        )
        for video_id in _queued_downloads(rdx)
    ]

    lvm.favorites = [
        get_video_view_model(
            video_id,
            rdx,
            VideoOption.SHOW_POSTER,
            VideoOption.SHOW_DURATION,
            VideoOption.SHOW_PUBLISHED_DATE,
        )
        for video_id in rdx.sort(rdx.keys(p.VIDEO_FAVORITE), False, p.VIDEO_TITLE)
    ]

    lvm.has_history = len(rdx.keys(p.VIDEO_ENDED_DATE)) > 0

    return lvm