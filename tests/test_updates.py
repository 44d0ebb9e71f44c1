from datetime import datetime

import pytest

from yet import properties as p
from yet.redux import open_redux
from yet.updates import (
    record_ended,
    record_progress,
    toggle_property,
    toggle_time_property,
    trim_time,
    update_channel,
    update_playlist,
    update_video,
)

VID = "abcdefghijk"


@pytest.fixture
def rdx(tmp_path):
    return open_redux(tmp_path, *p.all_properties())


def _parses(ts):
    text = ts[:-1] + "+00:00" if ts.endswith("Z") else ts
    return datetime.fromisoformat(text).tzinfo is not None


def test_trim_time():
    assert trim_time("12.5") == "12"
    assert trim_time("30") == "30"


def test_toggle_property(rdx):
    toggle_property(rdx, VID, p.VIDEO_FAVORITE, True)
    assert rdx.get_all_values(p.VIDEO_FAVORITE, VID) == [p.TRUE_VALUE]
    toggle_property(rdx, VID, p.VIDEO_FAVORITE, False)
    assert not rdx.has_key(p.VIDEO_FAVORITE, VID)


def test_toggle_time_property(rdx):
    toggle_time_property(rdx, VID, p.VIDEO_ENDED_DATE, True)
    assert _parses(rdx.get_last_val(p.VIDEO_ENDED_DATE, VID))
    toggle_time_property(rdx, VID, p.VIDEO_ENDED_DATE, False)
    assert not rdx.has_key(p.VIDEO_ENDED_DATE, VID)


def test_update_video_sets_flags(rdx):
    rdx.add_values(p.VIDEO_PROGRESS, VID, "10")
    url = update_video(
        rdx, VID, {"favorite": [""], "ended": [""], "ended-reason": ["skipped"]}
    )
    assert url == "/watch?v=" + VID
    assert rdx.has_value(p.VIDEO_FAVORITE, VID, p.TRUE_VALUE)
    assert rdx.has_key(p.VIDEO_ENDED_DATE, VID)
    assert rdx.get_last_val(p.VIDEO_ENDED_REASON, VID) == "skipped"
    assert not rdx.has_key(p.VIDEO_PROGRESS, VID)
    assert not rdx.has_key(p.VIDEO_DOWNLOAD_QUEUED, VID)


def test_update_video_keeps_progress_and_skips_reason(rdx):
    rdx.add_values(p.VIDEO_PROGRESS, VID, "10")
    update_video(rdx, VID, {"progress": "", "ended-reason": "skipped"})
    assert rdx.get_last_val(p.VIDEO_PROGRESS, VID) == "10"
    assert not rdx.has_key(p.VIDEO_ENDED_REASON, VID)


def test_update_video_empty_id(rdx):
    assert update_video(rdx, "", {"favorite": ""}) == "/list"
    assert rdx.keys(p.VIDEO_FAVORITE) == []


def test_update_playlist(rdx):
    url = update_playlist(rdx, "PL1", {"auto-refresh": "", "download-policy": "all"})
    assert url == "/playlist?list=PL1"
    assert rdx.has_value(p.PLAYLIST_AUTO_REFRESH, "PL1", p.TRUE_VALUE)
    assert rdx.get_last_val(p.PLAYLIST_DOWNLOAD_POLICY, "PL1") == "all"
    assert not rdx.has_key(p.PLAYLIST_EXPAND, "PL1")


def test_update_channel_default_policy(rdx):
    rdx.add_values(p.CHANNEL_EXPAND, "UC1", p.TRUE_VALUE)
    url = update_channel(rdx, "UC1", {})
    assert url == "/channel?id=UC1"
    assert rdx.get_last_val(p.CHANNEL_DOWNLOAD_POLICY, "UC1") == "recent"
    assert not rdx.has_key(p.CHANNEL_EXPAND, "UC1")


def test_record_ended(rdx):
    record_ended(rdx, VID, "completed")
    assert _parses(rdx.get_last_val(p.VIDEO_ENDED_DATE, VID))
    assert not rdx.has_key(p.VIDEO_ENDED_REASON, VID)
    record_ended(rdx, VID, "seen-enough")
    assert rdx.get_last_val(p.VIDEO_ENDED_REASON, VID) == "seen-enough"


def test_record_progress(rdx):
    record_progress(rdx, VID, "42.7")
    assert rdx.get_all_values(p.VIDEO_PROGRESS, VID) == ["42"]