import pytest

from yet.paths import AbsDir, Layout, ThumbnailQuality


@pytest.fixture
def layout(tmp_path):
    lay = Layout(root=tmp_path)
    lay.ensure()
    return lay


def test_ensure_creates_all_dirs(layout):
    assert all(layout.abs_dir(d).is_dir() for d in AbsDir)


def test_abs_dir_accepts_string_and_override(tmp_path):
    other = tmp_path / "elsewhere"
    lay = Layout(root=tmp_path, overrides={AbsDir.VIDEOS: other})
    assert lay.abs_dir("videos") == other
    assert lay.abs_dir(AbsDir.METADATA) == tmp_path / "metadata"


def test_poster_path_layout(layout):
    path = layout.abs_poster_path("abcdef", ThumbnailQuality.HQ)
    base = layout.abs_dir(AbsDir.POSTERS)
    assert path.parent == base / "a" / "b" / "abcdef"
    assert path.parent.is_dir()
    assert path.name == "hqdefault.jpg"


def test_captions_path(layout):
    path = layout.abs_captions_track_path("xyz123", "en")
    assert path.name == "xyz123_en.ytt"
    assert path.parent == layout.abs_dir(AbsDir.CAPTIONS) / "x" / "y" / "xyz123"


@pytest.mark.parametrize("video_id", ["", "a"])
def test_short_video_id_rejected(layout, video_id):
    with pytest.raises(ValueError):
        layout.abs_poster_path(video_id, ThumbnailQuality.MAX_RES)


def test_player_paths(layout):
    players = layout.abs_dir(AbsDir.PLAYERS)
    assert layout.abs_player_path("v1") == players / "v1.js"
    assert layout.abs_n_param_decoder_path("v1") == players / "v1-n.js"
    assert layout.abs_signature_cipher_decoder_path("v1") == players / "v1-signatureCipher.js"


def test_cookies_path(layout):
    assert layout.abs_cookies_path() == layout.abs_dir(AbsDir.INPUT) / "cookies.txt"