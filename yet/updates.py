"""Updates of video, playlist and channel properties requested by the web views."""

from collections.abc import Mapping, Sequence

from yet import properties as p
from yet.local_video import fmt_now
from yet.policies import (
    DEFAULT_DOWNLOAD_POLICY,
    DEFAULT_ENDED_REASON,
    parse_download_policy,
    parse_video_ended_reason,
)
from yet.redux import Redux

Query = Mapping[str, "str | Sequence[str]"]


def _get(query: Query, name: str) -> str:
    value = query.get(name)
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value[0] if value else ""


def toggle_property(rdx: Redux, item_id: str, prop: str, condition: bool) -> None:
    """Set the property to true when condition holds, remove it otherwise."""
    if condition:
        if not rdx.has_value(prop, item_id, p.TRUE_VALUE):
            rdx.replace_values(prop, item_id, p.TRUE_VALUE)
    elif rdx.has_key(prop, item_id):
        rdx.cut_keys(prop, item_id)


def toggle_time_property(rdx: Redux, item_id: str, prop: str, condition: bool) -> None:
    """Set the property to the current time when condition holds, remove it otherwise."""
    if condition:
        rdx.replace_values(prop, item_id, fmt_now())
    elif rdx.has_key(prop, item_id):
        rdx.cut_keys(prop, item_id)


def update_video(rdx: Redux, video_id: str, query: Query) -> str:
    """Apply the video management form; return the page to redirect to."""
    rdx.refresh()
    if not video_id:
        return "/list"

    for prop, name in {
        p.VIDEO_FAVORITE: "favorite",
        p.VIDEO_FORCED_DOWNLOAD: "forced-download",
    }.items():
        toggle_property(rdx, video_id, prop, name in query)

    for prop, name in {
        p.VIDEO_ENDED_DATE: "ended",
        p.VIDEO_DOWNLOAD_QUEUED: "download-queued",
    }.items():
        toggle_time_property(rdx, video_id, prop, name in query)

    # progress is cleared when the flag is absent
    if "progress" not in query:
        toggle_property(rdx, video_id, p.VIDEO_PROGRESS, False)

    # the ended reason is only set for ended videos
    if "ended" in query:
        reason = DEFAULT_ENDED_REASON
        requested = _get(query, "ended-reason")
        if requested:
            reason = parse_video_ended_reason(requested)
        rdx.replace_values(p.VIDEO_ENDED_REASON, video_id, reason.value)

    return "/watch?v=" + video_id


def _update_collection(
    rdx: Redux,
    item_id: str,
    query: Query,
    bool_inputs: Mapping[str, str],
    policy_property: str,
) -> None:
    for prop, name in bool_inputs.items():
        toggle_property(rdx, item_id, prop, name in query)
    policy = DEFAULT_DOWNLOAD_POLICY
    requested = _get(query, "download-policy")
    if requested:
        policy = parse_download_policy(requested)
    rdx.replace_values(policy_property, item_id, policy.value)


def update_playlist(rdx: Redux, playlist_id: str, query: Query) -> str:
    """Apply the playlist management form; return the page to redirect to."""
    rdx.refresh()
    if not playlist_id:
        return "/list"
    _update_collection(
        rdx,
        playlist_id,
        query,
        {
            p.PLAYLIST_AUTO_REFRESH: "auto-refresh",
            p.PLAYLIST_EXPAND: "expand",
            p.PLAYLIST_AUTO_DOWNLOAD: "auto-download",
        },
        p.PLAYLIST_DOWNLOAD_POLICY,
    )
    return "/playlist?list=" + playlist_id


def update_channel(rdx: Redux, channel_id: str, query: Query) -> str:
    """Apply the channel management form; return the page to redirect to."""
    rdx.refresh()
    if not channel_id:
        return "/list"
    _update_collection(
        rdx,
        channel_id,
        query,
        {
            p.CHANNEL_AUTO_REFRESH: "auto-refresh",
            p.CHANNEL_EXPAND: "expand",
            p.CHANNEL_AUTO_DOWNLOAD: "auto-download",
        },
        p.CHANNEL_DOWNLOAD_POLICY,
    )
    return "/channel?id=" + channel_id


def record_ended(rdx: Redux, video_id: str, reason: str = "") -> None:
    """Store the time a video ended and, when not the default, why."""
    rdx.refresh()
    parsed = parse_video_ended_reason(reason)
    rdx.replace_values(p.VIDEO_ENDED_DATE, video_id, fmt_now())
    if parsed != DEFAULT_ENDED_REASON:
        rdx.replace_values(p.VIDEO_ENDED_REASON, video_id, parsed.value)


def trim_time(ts: str) -> str:
    """Drop the fractional part of a seconds value."""
    head, sep, _ = ts.partition(".")
    return head if sep else ts


def record_progress(rdx: Redux, video_id: str, current_time: str) -> None:
    """Store the playback position of a video in whole seconds."""
    rdx.refresh()
    rdx.replace_values(p.VIDEO_PROGRESS, video_id, trim_time(current_time))