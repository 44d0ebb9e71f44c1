import os
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from yet.local_video import (
    AmbiguousVideoError,
    fmt_now,
    locate_local_video,
    rel_local_video_filename,
    sanitize,
    yt_dlp_binary,
)

VIDEO_ID = "abcdefghijk"


def test_rel_filename_with_channel_and_title():
    result = rel_local_video_filename("Channel", "Title", VIDEO_ID)
    assert result == os.path.join("Channel", f"Title-{VIDEO_ID}") + ".mp4"


def test_rel_filename_without_channel_and_title():
    assert rel_local_video_filename("", "", VIDEO_ID) == VIDEO_ID + ".mp4"


def test_rel_filename_title_only():
    assert rel_local_video_filename("", "Title", VIDEO_ID) == f"Title-{VIDEO_ID}.mp4"


def test_sanitize_removes_separators():
    result = sanitize('a/b\\c:d?e')
    assert "/" not in result and "\\" not in result and "?" not in result
    assert result.startswith("a")


def test_unsafe_title_stays_in_channel_dir():
    result = rel_local_video_filename("Chan", "x/y", VIDEO_ID)
    assert len(Path(result).parts) == 2


def test_locate_round_trip(tmp_path):
    rel = rel_local_video_filename("Chan", "Some Title", VIDEO_ID)
    target = tmp_path / rel
    target.parent.mkdir(parents=True)
    target.write_bytes(b"")
    assert locate_local_video(tmp_path, VIDEO_ID) == target


def test_locate_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        locate_local_video(tmp_path, VIDEO_ID)


def test_locate_ambiguous_raises(tmp_path):
    for title in ("One", "Two"):
        target = tmp_path / rel_local_video_filename("Chan", title, VIDEO_ID)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"")
    with pytest.raises(AmbiguousVideoError):
        locate_local_video(tmp_path, VIDEO_ID)


@pytest.mark.parametrize(
    "platform_name, expected",
    [("darwin", "yt-dlp_macos"), ("linux", "yt-dlp_linux"), ("windows", "yt-dlp.exe")],
)
def test_yt_dlp_binary(platform_name, expected):
    assert yt_dlp_binary(platform_name) == expected


def test_yt_dlp_binary_unknown_platform():
    with pytest.raises(RuntimeError):
        yt_dlp_binary("plan9")


def test_fmt_now_utc_round_trip():
    moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    text = fmt_now(moment)
    assert text.endswith("Z")
    assert datetime.fromisoformat(text.replace("Z", "+00:00")) == moment


def test_fmt_now_drops_fractions():
    moment = datetime(2024, 6, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
    text = fmt_now(moment)
    assert "." not in text
    assert datetime.fromisoformat(text.replace("Z", "+00:00")) == moment.replace(microsecond=0)