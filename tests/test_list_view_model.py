import pytest

from yet import properties as p
from yet.list_view_model import NEW_ITEMS, NO_NEW_ITEMS, get_list_view_model
from yet.redux import open_redux


@pytest.fixture
def rdx(tmp_path):
    return open_redux(tmp_path, *p.all_properties())


def test_empty_store(rdx):
    lvm = get_list_view_model(rdx)
    assert lvm.continue_videos == []
    assert lvm.videos == []
    assert lvm.downloads == []
    assert lvm.favorites == []
    assert lvm.channels == {}
    assert lvm.playlists == {}
    assert lvm.has_history is False
    assert lvm.channels_order == [NEW_ITEMS, NO_NEW_ITEMS]


def test_continue_excludes_ended_and_sorts_by_title(rdx):
    rdx.add_values(p.VIDEO_PROGRESS, "vid-b", "10")
    rdx.add_values(p.VIDEO_PROGRESS, "vid-a", "20")
    rdx.add_values(p.VIDEO_PROGRESS, "vid-c", "30")
    rdx.add_values(p.VIDEO_TITLE, "vid-b", "Alpha")
    rdx.add_values(p.VIDEO_TITLE, "vid-a", "Beta")
    rdx.add_values(p.VIDEO_ENDED_DATE, "vid-c", "2024-01-01T00:00:00Z")
    lvm = get_list_view_model(rdx)
    assert [v.video_id for v in lvm.continue_videos] == ["vid-b", "vid-a"]
    assert lvm.has_history is True


def test_downloads_skip_auto_refreshing_channel_videos(rdx):
    for vid in ("d1", "d2", "d3", "d4"):
        rdx.add_values(p.VIDEO_DOWNLOAD_COMPLETED, vid, "2024-01-01T00:00:00Z")
    rdx.add_values(p.VIDEO_FAVORITE, "d2", p.TRUE_VALUE)
    rdx.add_values(p.CHANNEL_AUTO_REFRESH, "ch", p.TRUE_VALUE)
    rdx.add_values(p.CHANNEL_VIDEOS, "ch", "d3")
    rdx.add_values(p.PLAYLIST_AUTO_REFRESH, "PL1", p.TRUE_VALUE)
    rdx.add_values(p.PLAYLIST_VIDEOS, "PL1", "d4")
    lvm = get_list_view_model(rdx)
    assert [v.video_id for v in lvm.videos] == ["d1"]
    assert [v.video_id for v in lvm.favorites] == ["d2"]


def test_channels_grouped_by_new_videos(rdx):
    rdx.add_values(p.CHANNEL_AUTO_REFRESH, "c-new", p.TRUE_VALUE)
    rdx.add_values(p.CHANNEL_AUTO_REFRESH, "c-old", p.TRUE_VALUE)
    rdx.add_values(p.CHANNEL_VIDEOS, "c-new", "v1", "v2")
    rdx.add_values(p.CHANNEL_VIDEOS, "c-old", "v3")
    rdx.add_values(p.VIDEO_ENDED_DATE, "v3", "2024-01-01T00:00:00Z")
    lvm = get_list_view_model(rdx)
    assert [c.channel_id for c in lvm.channels[NEW_ITEMS]] == ["c-new"]
    assert [c.channel_id for c in lvm.channels[NO_NEW_ITEMS]] == ["c-old"]


def test_playlists_only_new_group_present(rdx):
    rdx.add_values(p.PLAYLIST_AUTO_REFRESH, "PLx", p.TRUE_VALUE)
    rdx.add_values(p.PLAYLIST_VIDEOS, "PLx", "v1")
    lvm = get_list_view_model(rdx)
    assert [pl.playlist_id for pl in lvm.playlists[NEW_ITEMS]] == ["PLx"]
    assert NO_NEW_ITEMS not in lvm.playlists


def test_queued_downloads_completed_after_queue_are_dropped(rdx):
    rdx.add_values(p.VIDEO_DOWNLOAD_QUEUED, "q1", "2024-01-02T00:00:00Z")
    rdx.add_values(p.VIDEO_DOWNLOAD_COMPLETED, "q1", "2024-01-01T00:00:00Z")
    rdx.add_values(p.VIDEO_DOWNLOAD_QUEUED, "q2", "2024-01-01T00:00:00Z")
    rdx.add_values(p.VIDEO_DOWNLOAD_COMPLETED, "q2", "2024-01-02T00:00:00Z")
    rdx.add_values(p.VIDEO_DOWNLOAD_QUEUED, "q3", "2024-01-01T00:00:00Z")
    lvm = get_list_view_model(rdx)
    assert sorted(v.video_id for v in lvm.downloads) == ["q1", "q3"]