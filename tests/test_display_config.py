import pytest

from gamesys.color import Color
from gamesys.config_reader import ConfigError
from gamesys.display_config import RendererConfig, WindowConfig

HEADER = "Renderer=1;Window=2;"
RENDERER = "Color=223,223,223,255;Flags=2;"
WINDOW = "Title=My Game;PosX=0;PosY=10;Width=800;Height=600;Flags=4;"


def test_renderer_read():
    cfg = RendererConfig.read([HEADER, RENDERER, WINDOW])
    assert cfg.draw_color == Color(223, 223, 223, 255)
    assert cfg.flags == 2


def test_window_read():
    cfg = WindowConfig.read([HEADER, RENDERER, WINDOW])
    assert (cfg.name, cfg.pos_x, cfg.pos_y) == ("My Game", 0, 10)
    assert (cfg.width, cfg.height, cfg.flags) == (800, 600, 4)


def test_missing_section_returns_none():
    assert RendererConfig.read(["Window=1;", WINDOW]) is None


def test_section_index_past_end_returns_none():
    assert WindowConfig.read(["Window=5;", WINDOW]) is None


def test_empty_config_raises():
    with pytest.raises(ConfigError):
        RendererConfig.read([])


def test_renderer_wrong_color_count_raises():
    with pytest.raises(ConfigError, match="corrupted"):
        RendererConfig.read([HEADER, "Color=1,2,3;Flags=2;", WINDOW])


def test_renderer_negative_flags_raises():
    with pytest.raises(ConfigError, match="corrupted"):
        RendererConfig.read([HEADER, "Color=1,2,3,4;Flags=-1;", WINDOW])


def test_window_empty_title_raises():
    line = "Title=;PosX=0;PosY=0;Width=800;Height=600;Flags=4;"
    with pytest.raises(ConfigError, match="corrupted"):
        WindowConfig.read([HEADER, RENDERER, line])


def test_window_negative_width_raises():
    line = "Title=Game;PosX=0;PosY=0;Width=-5;Height=600;Flags=4;"
    with pytest.raises(ConfigError):
        WindowConfig.read([HEADER, RENDERER, line])


def test_window_negative_pos_y_is_accepted():
    line = "Title=Game;PosX=3;PosY=-7;Width=1;Height=2;Flags=4;"
    cfg = WindowConfig.read([HEADER, RENDERER, line])
    assert cfg.pos_y == -7


def test_window_missing_key_raises():
    line = "Title=Game;PosX=0;PosY=0;Height=600;Flags=4;"
    with pytest.raises(ConfigError):
        WindowConfig.read([HEADER, RENDERER, line])