import logging

import pytest

from playingcard import fonts


@pytest.fixture(autouse=True)
def fresh_cache(monkeypatch):
    monkeypatch.delenv(fonts.FONT_ENV_VAR, raising=False)
    fonts.clear_cache()
    yield
    fonts.clear_cache()


def test_family_names_match_file_names():
    assert fonts._normalize("Noto Sans CJK TC Regular") == fonts._normalize("NotoSansCJKtc-Regular")
    assert fonts._normalize("DejaVu Sans") == fonts._normalize("dejavu_sans")


def test_env_override_wins(monkeypatch, tmp_path):
    font_file = tmp_path / "custom.ttf"
    font_file.write_bytes(b"")
    monkeypatch.setenv(fonts.FONT_ENV_VAR, str(font_file))
    assert fonts.find_font("Anything") == str(font_file)


def test_missing_env_override_is_ignored(monkeypatch, caplog):
    monkeypatch.setenv(fonts.FONT_ENV_VAR, "/no/such/font.ttf")
    with caplog.at_level(logging.WARNING):
        path = fonts.find_font("Some Family That Does Not Exist")
    assert path != "/no/such/font.ttf"
    assert "does not exist" in caplog.text


def test_family_can_be_a_path(tmp_path):
    font_file = tmp_path / "family.ttf"
    font_file.write_bytes(b"")
    assert fonts.find_font(str(font_file)) == str(font_file)


def test_broken_font_file_falls_back_to_default(tmp_path, caplog):
    font_file = tmp_path / "broken.ttf"
    font_file.write_bytes(b"not a font")
    with caplog.at_level(logging.WARNING):
        font = fonts.load_font(str(font_file), 30)
    assert font is not None
    assert "Failed to load font" in caplog.text


def test_fonts_are_cached():
    first = fonts.load_font(None, 24.2)
    second = fonts.load_font(None, 24)
    assert first is second
    assert fonts.load_font(None, 0.1) is fonts.load_font(None, 1)
