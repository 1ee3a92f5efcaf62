"""Renderer and window settings read from config lines.

The first config line maps each section name to the index of the line that
holds the section, e.g. ``Renderer=1;Window=2;``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from gamesys.color import Color
from gamesys.config_reader import ConfigError, read_int, read_int_array, read_string
from gamesys.log import console_warning


def _section_line(lines: Sequence[str], section: str) -> str | None:
    """Return the line that holds section, or None (with a warning) if it has none."""
    if not lines:
        raise ConfigError("config is empty")
    try:
        index = read_int(lines[0], section)
    except ConfigError:
        index = -1
    if index < 0 or index >= len(lines):
        console_warning('Cannot find section "%s" in config file.', section)
        return None
    return lines[index]


def _corrupted(lines: Sequence[str], line: str) -> ConfigError:
    return ConfigError(f"Config file corrupted. Line: {list(lines).index(line) + 1}")


@dataclass
class RendererConfig:
    """Draw colour and creation flags of the renderer."""

    draw_color: Color
    flags: int

    @classmethod
    def read(cls, lines: Sequence[str]) -> RendererConfig | None:
        """Read the Renderer section; return None if the config has no such section."""
        line = _section_line(lines, "Renderer")
        if line is None:
            return None
        color = read_int_array(line, "Color")
        if len(color) != 4:
            raise _corrupted(lines, line)
        try:
            draw_color = Color(*color)
        except (TypeError, ValueError) as exc:
            raise _corrupted(lines, line) from exc
        flags = read_int(line, "Flags")
        if flags < 0:
            raise _corrupted(lines, line)
        return cls(draw_color=draw_color, flags=flags)


@dataclass
class WindowConfig:
    """Title, placement, size and creation flags of the window."""

    name: str
    pos_x: int
    pos_y: int
    width: int
    height: int
    flags: int

    @classmethod
    def read(cls, lines: Sequence[str]) -> WindowConfig | None:
        """Read the Window section; return None if the config has no such section."""
        line = _section_line(lines, "Window")
        if line is None:
            return None
        name = read_string(line, "Title")
        if not name:
            raise _corrupted(lines, line)
        pos_x = read_int(line, "PosX")
        if pos_x < 0:
            raise _corrupted(lines, line)
        pos_y = read_int(line, "PosY")
        width = read_int(line, "Width")
        if width < 0:
            raise _corrupted(lines, line)
        height = read_int(line, "Height")
        if height < 0:
            raise _corrupted(lines, line)
        flags = read_int(line, "Flags")
        if flags < 0:
            raise _corrupted(lines, line)
        return cls(name=name, pos_x=pos_x, pos_y=pos_y,
                   width=width, height=height, flags=flags)