"""View models of channels and playlists."""

from dataclasses import dataclass, field

from yet import properties as p
from yet.not_ended import channel_not_ended_videos, playlist_not_ended_videos
from yet.policies import (
    DEFAULT_DOWNLOAD_POLICY,
    DownloadPolicy,
    all_download_policies,
    parse_download_policy,
)
from yet.redux import Redux
from yet.video_view_model import VideoOption, VideoViewModel, get_video_view_model


@dataclass
class ChannelViewModel:
    channel_id: str
    channel_title: str
    channel_description: str
    channel_badge_count: int
    videos: list[VideoViewModel] = field(default_factory=list)
    playlists_order: list[str] = field(default_factory=list)
    playlists: dict[str, str] = field(default_factory=dict)
    channel_auto_refresh: bool = False
    channel_auto_download: bool = False
    channel_download_policy: DownloadPolicy = DEFAULT_DOWNLOAD_POLICY
    all_download_policies: list[DownloadPolicy] = field(default_factory=all_download_policies)
    channel_expand: bool = False


@dataclass
class PlaylistViewModel:
    playlist_id: str
    playlist_title: str
    playlist_channel_title: str
    playlist_badge_count: int
    playlist_auto_refresh: bool = False
    playlist_auto_download: bool = False
    playlist_download_policy: DownloadPolicy = DEFAULT_DOWNLOAD_POLICY
    all_download_policies: list[DownloadPolicy] = field(default_factory=all_download_policies)
    playlist_expand: bool = False
    videos: list[VideoViewModel] = field(default_factory=list)


def _is_true(rdx: Redux, prop: str, key: str) -> bool:
    return rdx.get_last_val(prop, key) == p.TRUE_VALUE


def _policy(rdx: Redux, prop: str, key: str) -> DownloadPolicy:
    stored = rdx.get_last_val(prop, key)
    return DEFAULT_DOWNLOAD_POLICY if stored is None else parse_download_policy(stored)


def get_channel_view_model(channel_id: str, rdx: Redux) -> ChannelViewModel:
    """Build the view model of a channel with its videos and playlists."""
    channel_title = rdx.get_last_val(p.CHANNEL_TITLE, channel_id) or channel_id
    channel_description = rdx.get_last_val(p.CHANNEL_DESCRIPTION, channel_id) or ""

    video_ids = rdx.get_all_values(p.CHANNEL_VIDEOS, channel_id) or []
    videos = [
        get_video_view_model(
            video_id,
            rdx,
            VideoOption.SHOW_POSTER,
            VideoOption.SHOW_DURATION,
            VideoOption.SHOW_PUBLISHED_DATE,
            VideoOption.SHOW_VIEW_COUNT,
        )
        for video_id in video_ids
    ]

    playlists_order = rdx.get_all_values(p.CHANNEL_PLAYLISTS, channel_id) or []
    playlists = {}
    for playlist_id in playlists_order:
        title = rdx.get_last_val(p.PLAYLIST_TITLE, playlist_id)
        if title:
            playlists[playlist_id] = title

    return ChannelViewModel(
        channel_id=channel_id,
        channel_title=channel_title,
        channel_description=channel_description,
        channel_badge_count=len(channel_not_ended_videos(channel_id, rdx)),
        videos=videos,
        playlists_order=playlists_order,
        playlists=playlists,
        channel_auto_refresh=_is_true(rdx, p.CHANNEL_AUTO_REFRESH, channel_id),
        channel_auto_download=_is_true(rdx, p.CHANNEL_AUTO_DOWNLOAD, channel_id),
        channel_download_policy=_policy(rdx, p.CHANNEL_DOWNLOAD_POLICY, channel_id),
        all_download_policies=all_download_policies(),
        channel_expand=_is_true(rdx, p.CHANNEL_EXPAND, channel_id),
    )


def get_playlist_view_model(playlist_id: str, rdx: Redux) -> PlaylistViewModel | None:
    """Build the view model of a playlist, or None for an empty id."""
    if not playlist_id:
        return None

    video_ids = rdx.get_all_values(p.PLAYLIST_VIDEOS, playlist_id) or []
    videos = [
        get_video_view_model(
            video_id,
            rdx,
            VideoOption.SHOW_POSTER,
            VideoOption.SHOW_VIEW_COUNT,
            VideoOption.SHOW_DURATION,
            VideoOption.SHOW_PUBLISHED_DATE,
        )
        for video_id in video_ids
    ]

    return PlaylistViewModel(
        playlist_id=playlist_id,
        playlist_title=rdx.get_last_val(p.PLAYLIST_TITLE, playlist_id) or "",
        playlist_channel_title=rdx.get_last_val(p.PLAYLIST_CHANNEL, playlist_id) or "",
        playlist_badge_count=len(playlist_not_ended_videos(playlist_id, rdx)),
        playlist_auto_refresh=_is_true(rdx, p.PLAYLIST_AUTO_REFRESH, playlist_id),
        playlist_auto_download=_is_true(rdx, p.PLAYLIST_AUTO_DOWNLOAD, playlist_id),
        playlist_download_policy=_policy(rdx, p.PLAYLIST_DOWNLOAD_POLICY, playlist_id),
        all_download_policies=all_download_policies(),
        playlist_expand=_is_true(rdx, p.PLAYLIST_EXPAND, playlist_id),
        videos=videos,
    )