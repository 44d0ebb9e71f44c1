import pytest

from yet import properties as p
from yet.policies import VideoEndedReason, all_video_ended_reasons
from yet.redux import open_redux
from yet.video_models import get_video_error_view_model, get_video_management_view_model


@pytest.fixture
def rdx(tmp_path):
    return open_redux(tmp_path, *p.all_properties())


def test_error_title_fallback(rdx):
    vm = get_video_error_view_model("abc", "boom", rdx)
    assert vm.video_title == "abc"
    assert vm.error == "boom"
    assert vm.video_id == "abc"


def test_error_stored_title(rdx):
    rdx.add_values(p.VIDEO_TITLE, "abc", "Title")
    assert get_video_error_view_model("abc", "boom", rdx).video_title == "Title"


def test_management_defaults(rdx):
    vm = get_video_management_view_model("abc", rdx)
    assert vm.video_title == ""
    assert vm.current_time == ""
    assert not (vm.favorite or vm.progress or vm.ended or vm.download_queued or vm.forced_download)
    assert vm.ended_reason is VideoEndedReason.COMPLETED
    assert vm.all_ended_reasons == all_video_ended_reasons()


def test_management_flags(rdx):
    rdx.add_values(p.VIDEO_TITLE, "abc", "Title")
    rdx.add_values(p.VIDEO_PROGRESS, "abc", "33")
    rdx.add_values(p.VIDEO_FAVORITE, "abc", p.TRUE_VALUE)
    rdx.add_values(p.VIDEO_ENDED_DATE, "abc", "2024-01-01T00:00:00Z")
    rdx.add_values(p.VIDEO_ENDED_REASON, "abc", "seen-enough")
    rdx.add_values(p.VIDEO_FORCED_DOWNLOAD, "abc", p.TRUE_VALUE)
    vm = get_video_management_view_model("abc", rdx)
    assert vm.video_title == "Title"
    assert vm.current_time == "33"
    assert vm.favorite and vm.progress and vm.ended and vm.forced_download
    assert vm.ended_reason is VideoEndedReason.SEEN_ENOUGH


def test_queued_not_completed(rdx):
    rdx.add_values(p.VIDEO_DOWNLOAD_QUEUED, "abc", "2024-01-02T00:00:00Z")
    assert get_video_management_view_model("abc", rdx).download_queued is True


def test_queued_then_completed(rdx):
    rdx.add_values(p.VIDEO_DOWNLOAD_QUEUED, "abc", "2024-01-01T00:00:00Z")
    rdx.add_values(p.VIDEO_DOWNLOAD_COMPLETED, "abc", "2024-01-02T00:00:00Z")
    assert get_video_management_view_model("abc", rdx).download_queued is False


def test_requeued_after_completion(rdx):
    rdx.add_values(p.VIDEO_DOWNLOAD_COMPLETED, "abc", "2024-01-01T00:00:00Z")
    rdx.add_values(p.VIDEO_DOWNLOAD_QUEUED, "abc", "2024-01-02T00:00:00Z")
    assert get_video_management_view_model("abc", rdx).download_queued is True