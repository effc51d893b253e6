import pytest
from PIL import ImageFont

from textmark import fonts
from textmark.errors import ConfigurationError, FontLoadError


def test_load_font_requires_path():
    with pytest.raises(ConfigurationError):
        fonts.load_font("", 20)


def test_load_font_missing_file(tmp_path):
    with pytest.raises(FontLoadError):
        fonts.load_font(str(tmp_path / "missing.ttf"), 20)


def test_load_font_unparseable_file(tmp_path):
    bogus = tmp_path / "bogus.ttf"
    bogus.write_bytes(b"not a font")
    with pytest.raises(FontLoadError):
        fonts.load_font(str(bogus), 20)


def test_find_default_font_first_existing_wins(tmp_path):
    first = tmp_path / "a.ttf"
    second = tmp_path / "b.ttf"
    second.write_bytes(b"")
    first.write_bytes(b"")
    assert fonts.find_default_font([str(tmp_path / "nope.ttf"), str(first), str(second)]) == str(first)
    assert fonts.find_default_font([str(tmp_path / "nope.ttf")]) is None


def test_fallback_to_bundled_font(tmp_path, warnings_seen):
    font = fonts.load_font_with_fallback(
        str(tmp_path / "missing.ttf"), 24, warn=warnings_seen.warn, candidates=()
    )
    assert font.getbbox("A")[2] > 0
    assert len(warnings_seen) == 2
    assert "missing.ttf" in warnings_seen[0]
    assert "bundled" in warnings_seen[1]


def test_fallback_skips_broken_system_font(tmp_path, warnings_seen):
    broken = tmp_path / "arial.ttf"
    broken.write_bytes(b"garbage")
    font = fonts.load_font_with_fallback(None, 24, warn=warnings_seen.warn, candidates=[str(broken)])
    assert font is not None
    assert any("fallback font" in w for w in warnings_seen)


def test_bundled_font_failure_is_fatal(monkeypatch, warnings_seen):
    def broken(size=None):
        raise OSError("no freetype")

    monkeypatch.setattr(ImageFont, "load_default", broken)
    with pytest.raises(FontLoadError):
        fonts.load_font_with_fallback(None, 24, warn=warnings_seen.warn, candidates=())
