import pytest

from yet import properties as p
from yet.cli import main
from yet.local_video import fmt_now
from yet.paths import AbsDir, Layout
from yet.redux import open_redux


def _store(root):
    return open_redux(Layout(root=root).abs_dir(AbsDir.METADATA), *p.all_properties())


def test_version(capsys):
    assert main(["version"]) == 0
    assert capsys.readouterr().out.strip() == "unknown version"


def test_add_and_remove_channel(tmp_path):
    root = str(tmp_path)
    code = main(
        ["--root", root, "add-channel", "--channel-id", "UC1",
         "--auto-refresh", "--download-policy", "all"]
    )
    assert code == 0
    rdx = _store(tmp_path)
    assert rdx.get_all_values(p.CHANNEL_AUTO_REFRESH, "UC1") == [p.TRUE_VALUE]
    assert rdx.get_last_val(p.CHANNEL_DOWNLOAD_POLICY, "UC1") == "all"

    assert main(["--root", root, "remove-channel", "--channel-id", "UC1", "--auto-refresh"]) == 0
    assert not _store(tmp_path).has_key(p.CHANNEL_AUTO_REFRESH, "UC1")


def test_remove_playlist_invalid_id_fails(tmp_path, capsys):
    code = main(["--root", str(tmp_path), "remove-playlist", "--playlist-id", "bogus"])
    assert code == 1
    assert "bogus" in capsys.readouterr().err


def test_scrub_ended_properties(tmp_path):
    rdx = _store(tmp_path)
    rdx.add_values(p.VIDEO_ENDED_DATE, "v1", fmt_now())
    rdx.add_values(p.VIDEO_DURATION, "v1", "60")
    rdx.add_values(p.VIDEO_TITLE, "v1", "Title")

    assert main(["--root", str(tmp_path), "scrub-ended-properties"]) == 0
    after = _store(tmp_path)
    assert not after.has_key(p.VIDEO_DURATION, "v1")
    assert after.get_last_val(p.VIDEO_TITLE, "v1") == "Title"


def test_cleanup_ended_videos_now(tmp_path):
    rdx = _store(tmp_path)
    rdx.add_values(p.VIDEO_ENDED_DATE, "abcdefghijk", fmt_now())

    assert main(["--root", str(tmp_path), "cleanup-ended-videos", "--now"]) == 0
    assert _store(tmp_path).has_key(p.VIDEO_DOWNLOAD_CLEANED_UP, "abcdefghijk")


def test_unknown_command_exits(tmp_path):
    with pytest.raises(SystemExit):
        main(["--root", str(tmp_path), "no-such-command"])