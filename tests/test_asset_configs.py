import pytest

from gamesys.asset_configs import (
    FontConfig,
    ImageConfig,
    MusicConfig,
    SoundConfig,
    TextConfig,
    read_font_configs,
    read_image_configs,
    read_music_configs,
    read_sound_configs,
    read_text_configs,
)
from gamesys.color import BLACK, Color
from gamesys.config_reader import ConfigError
from gamesys.defines import FontWrapAlign, Language

LINES = [
    "Font=1;Image=3;Music=4;Sound=5;Text=6;",
    "Type=Font;FileName=fonts/a.ttf;Size=12;WrapAlign=0;",
    "Type=Font;FileName=fonts/b.ttf;Size=24;WrapAlign=2;",
    "Type=Image;FileName=img/hero.png;Frames=4;",
    "Type=Music;FileName=music/theme.ogg;Volume=100;",
    "Type=Sound;FileName=sfx/click.wav;Volume=64;",
    "Type=Text;Color=255,0,0,255;FontId=1;WrapWidth=100;BG=Zdravei;EN=Hello\\, world;",
]


def test_font_section_stops_at_next_type():
    fonts = read_font_configs(LINES, "assets/")
    assert fonts == [
        FontConfig("assets/fonts/a.ttf", 12, FontWrapAlign.LEFT),
        FontConfig("assets/fonts/b.ttf", 24, FontWrapAlign.RIGHT),
    ]


def test_image_section():
    assert read_image_configs(LINES, "d/") == [ImageConfig("d/img/hero.png", 4)]


def test_music_and_sound_sections():
    assert read_music_configs(LINES, "") == [MusicConfig("music/theme.ogg", 100)]
    assert read_sound_configs(LINES, "x/") == [SoundConfig("x/sfx/click.wav", 64)]


def test_text_section():
    texts = read_text_configs(LINES)
    assert texts == [
        TextConfig(
            text_color=Color(255, 0, 0, 255),
            font_id=1,
            wrap_width=100,
            language_strings={Language.BG: "Zdravei", Language.EN: "Hello, world"},
        )
    ]


def test_text_config_defaults():
    cfg = TextConfig()
    assert cfg.text_color == BLACK
    assert cfg.language_strings == {}


def test_missing_section_warns_and_returns_empty(capsys):
    lines = ["Font=1;", "Type=Font;FileName=a.ttf;Size=1;WrapAlign=1;"]
    assert read_image_configs(lines, "") == []
    assert 'Cannot find section "Image" in config file.' in capsys.readouterr().err


def test_section_index_past_end_returns_empty(capsys):
    assert read_sound_configs(["Sound=9;"], "") == []
    assert "Sound" in capsys.readouterr().err


def test_empty_config_raises():
    with pytest.raises(ConfigError):
        read_font_configs([], "")


@pytest.mark.parametrize("record", ["Size=0;WrapAlign=0;", "Size=10;WrapAlign=3;",
                                    "Size=10;WrapAlign=-1;", "Size=10;WrapAlign=7;"])
def test_bad_font_line_reports_line_number(record):
    lines = ["Font=1;", "Type=Font;FileName=a.ttf;" + record]
    with pytest.raises(ConfigError, match="Line: 2"):
        read_font_configs(lines, "")


def test_negative_frames_rejected():
    lines = ["Image=1;", "Type=Image;FileName=a.png;Frames=-1;"]
    with pytest.raises(ConfigError, match="corrupted"):
        read_image_configs(lines, "")


@pytest.mark.parametrize("volume", ["0", "-5"])
def test_non_positive_volume_rejected(volume):
    lines = ["Music=1;", f"Type=Music;FileName=a.ogg;Volume={volume};"]
    with pytest.raises(ConfigError):
        read_music_configs(lines, "")


def test_empty_file_name_without_dir_rejected():
    lines = ["Sound=1;", "Type=Sound;FileName=;Volume=5;"]
    with pytest.raises(ConfigError):
        read_sound_configs(lines, "")


def test_text_color_needs_four_channels():
    lines = ["Text=1;", "Type=Text;Color=1,2,3;FontId=0;WrapWidth=0;BG=a;EN=b;"]
    with pytest.raises(ConfigError):
        read_text_configs(lines)


def test_text_requires_every_language():
    lines = ["Text=1;", "Type=Text;Color=1,2,3,4;FontId=0;WrapWidth=0;BG=;EN=b;"]
    with pytest.raises(ConfigError):
        read_text_configs(lines)


def test_text_negative_wrap_width_rejected():
    lines = ["Text=1;", "Type=Text;Color=1,2,3,4;FontId=0;WrapWidth=-2;BG=a;EN=b;"]
    with pytest.raises(ConfigError):
        read_text_configs(lines)