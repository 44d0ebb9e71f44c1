"""Adding and removing channel, playlist and video settings, and queueing downloads."""

from yet import properties as p
from yet.ids import parse_playlist_id
from yet.local_video import fmt_now
from yet.not_ended import channel_not_ended_videos, playlist_not_ended_videos
from yet.options import ChannelOptions, PlaylistOptions, VideoOptions
from yet.policies import DEFAULT_DOWNLOAD_POLICY, DEFAULT_ENDED_REASON
from yet.redux import Redux


def _validate(rdx: Redux, *properties: str) -> Redux:
    rdx.must_have(*properties)
    return rdx.refresh()


def add_channel(rdx: Redux, channel_id: str, opt: ChannelOptions | None = None) -> None:
    """Store the channel settings that differ from the defaults."""
    opt = opt or ChannelOptions()
    rdx = _validate(rdx, *p.all_properties())

    property_values: dict[str, dict[str, list[str]]] = {}
    if opt.auto_refresh:
        property_values[p.CHANNEL_AUTO_REFRESH] = {channel_id: [p.TRUE_VALUE]}
    if opt.auto_download:
        property_values[p.CHANNEL_AUTO_DOWNLOAD] = {channel_id: [p.TRUE_VALUE]}
    if opt.download_policy != DEFAULT_DOWNLOAD_POLICY:
        property_values[p.CHANNEL_DOWNLOAD_POLICY] = {channel_id: [opt.download_policy.value]}
    if opt.expand:
        property_values[p.CHANNEL_EXPAND] = {channel_id: [p.TRUE_VALUE]}

    for prop, id_values in property_values.items():
        rdx.batch_add_values(prop, id_values)


def _cut(rdx: Redux, property_keys: dict[str, str]) -> None:
    for prop, key in property_keys.items():
        rdx.cut_keys(prop, key)


def remove_channel(rdx: Redux, channel_id: str, opt: ChannelOptions | None = None) -> None:
    """Remove the channel settings selected by the options."""
    opt = opt or ChannelOptions()
    rdx = _validate(rdx, *p.channel_properties())

    keys: dict[str, str] = {}
    if opt.auto_refresh:
        keys[p.CHANNEL_AUTO_REFRESH] = channel_id
    if opt.auto_download:
        keys[p.CHANNEL_AUTO_DOWNLOAD] = channel_id
    if opt.download_policy != DEFAULT_DOWNLOAD_POLICY:
        keys[p.CHANNEL_DOWNLOAD_POLICY] = channel_id
    if opt.expand:
        keys[p.CHANNEL_EXPAND] = channel_id
    _cut(rdx, keys)


def remove_playlist(rdx: Redux, playlist_id: str, opt: PlaylistOptions | None = None) -> None:
    """Remove the playlist settings selected by the options."""
    opt = opt or PlaylistOptions()
    rdx = _validate(rdx, *p.playlist_properties())
    playlist_id = parse_playlist_id(playlist_id)

    keys: dict[str, str] = {}
    if opt.auto_refresh:
        keys[p.PLAYLIST_AUTO_REFRESH] = playlist_id
    if opt.auto_download:
        keys[p.PLAYLIST_AUTO_DOWNLOAD] = playlist_id
    if opt.download_policy != DEFAULT_DOWNLOAD_POLICY:
        keys[p.PLAYLIST_DOWNLOAD_POLICY] = playlist_id
    if opt.expand:
        keys[p.PLAYLIST_EXPAND] = playlist_id
    _cut(rdx, keys)


def remove_videos(rdx: Redux, video_id: str, opt: VideoOptions | None = None) -> None:
    """Remove the video properties selected by the options."""
    opt = opt or VideoOptions()
    rdx = _validate(rdx, *p.video_properties())

    keys: dict[str, str] = {}
    if opt.favorite:
        keys[p.VIDEO_FAVORITE] = video_id
    if opt.download_queue:
        keys[p.VIDEO_DOWNLOAD_QUEUED] = video_id
    if opt.progress:
        keys[p.VIDEO_PROGRESS] = video_id
    if opt.ended:
        keys[p.VIDEO_ENDED_DATE] = video_id
    if opt.reason != DEFAULT_ENDED_REASON:
        keys[p.VIDEO_ENDED_REASON] = video_id
    if opt.force:
        keys[p.VIDEO_FORCED_DOWNLOAD] = video_id
    _cut(rdx, keys)


def _queue(rdx: Redux, video_ids: list[str]) -> None:
    now = fmt_now()
    queue = {
        video_id: [now]
        for video_id in video_ids
        if not rdx.has_key(p.VIDEO_DOWNLOAD_QUEUED, video_id)
    }
    rdx.batch_add_values(p.VIDEO_DOWNLOAD_QUEUED, queue)


def queue_channels_downloads(rdx: Redux) -> None:
    """Queue not ended, not yet queued videos of auto-downloading channels."""
    rdx = _validate(rdx, *p.all_properties())
    for channel_id in rdx.keys(p.CHANNEL_AUTO_DOWNLOAD):
        _queue(rdx, channel_not_ended_videos(channel_id, rdx))


def queue_playlists_downloads(rdx: Redux) -> None:
    """Queue not ended, not yet queued videos of auto-downloading playlists."""
    rdx = _validate(rdx, *p.all_properties())
    for playlist_id in rdx.keys(p.PLAYLIST_AUTO_DOWNLOAD):
        _queue(rdx, playlist_not_ended_videos(playlist_id, rdx))