"""Font, image, music, sound and text asset settings read from config lines.

The first config line maps each section name to the index of the line where
the section starts, e.g. ``Font=1;Image=3;``. A section is the run of lines,
from that index on, whose ``Type`` record names the section.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from gamesys.color import BLACK, Color
from gamesys.config_reader import ConfigError, read_int, read_int_array, read_string
from gamesys.defines import (
    FontWrapAlign,
    Language,
    is_enum_value_valid,
    language_to_string,
)
from gamesys.log import console_warning


@dataclass
class FontConfig:
    """A font file with its point size and wrap alignment."""

    file_name: str = ""
    size: int = 0
    wrap_align: FontWrapAlign = FontWrapAlign.INVALID


@dataclass
class ImageConfig:
    """An image file and the number of animation frames laid out in it."""

    file_name: str = ""
    frames: int = 0


@dataclass
class MusicConfig:
    """A music file and its volume."""

    file_name: str = ""
    volume: int = 0


@dataclass
class SoundConfig:
    """A sound file and its volume."""

    file_name: str = ""
    volume: int = 0


@dataclass
class TextConfig:
    """A text in every language, with the colour, font and wrap width to render it."""

    text_color: Color = BLACK
    font_id: int = 0
    wrap_width: int = 0
    language_strings: dict[Language, str] = field(default_factory=dict)


def _corrupted(index: int) -> ConfigError:
    return ConfigError(f"Config file corrupted. Line: {index + 1}")


def _section(lines: Sequence[str], section: str) -> Iterator[tuple[int, str]]:
    """Yield (index, line) for each line of a section; warn if it is absent."""
    if not lines:
        raise ConfigError("config is empty")
    try:
        start = read_int(lines[0], section)
    except ConfigError:
        start = -1
    if start < 0 or start >= len(lines):
        console_warning('Cannot find section "%s" in config file.', section)
        return
    for index in range(start, len(lines)):
        line = lines[index]
        try:
            line_type = read_string(line, "Type")
        except ConfigError:
            break
        if line_type != section:
            break
        yield index, line


def _file_name(line: str, index: int, main_dir: str) -> str:
    name = str(main_dir) + read_string(line, "FileName")
    if not name:
        raise _corrupted(index)
    return name


def _volume(line: str, index: int) -> int:
    volume = read_int(line, "Volume")
    if not 0 < volume <= 0xFF:
        raise _corrupted(index)
    return volume


def read_font_configs(lines: Sequence[str], main_dir: str = "") -> list[FontConfig]:
    """Read the Font section; file names are prefixed with main_dir."""
    configs: list[FontConfig] = []
    for index, line in _section(lines, "Font"):
        file_name = _file_name(line, index, main_dir)
        size = read_int(line, "Size")
        if size <= 0:
            raise _corrupted(index)
        try:
            wrap_align = FontWrapAlign(read_int(line, "WrapAlign"))
        except ValueError as exc:
            raise _corrupted(index) from exc
        if not is_enum_value_valid(wrap_align):
            raise _corrupted(index)
        configs.append(FontConfig(file_name=file_name, size=size, wrap_align=wrap_align))
    return configs


def read_image_configs(lines: Sequence[str], main_dir: str = "") -> list[ImageConfig]:
    """Read the Image section; file names are prefixed with main_dir."""
    configs: list[ImageConfig] = []
    for index, line in _section(lines, "Image"):
        file_name = _file_name(line, index, main_dir)
        frames = read_int(line, "Frames")
        if frames < 0:
            raise _corrupted(index)
        configs.append(ImageConfig(file_name=file_name, frames=frames))
    return configs


def read_music_configs(lines: Sequence[str], main_dir: str = "") -> list[MusicConfig]:
    """Read the Music section; file names are prefixed with main_dir."""
    return [
        MusicConfig(file_name=_file_name(line, index, main_dir), volume=_volume(line, index))
        for index, line in _section(lines, "Music")
    ]


def read_sound_configs(lines: Sequence[str], main_dir: str = "") -> list[SoundConfig]:
    """Read the Sound section; file names are prefixed with main_dir."""
    return [
        SoundConfig(file_name=_file_name(line, index, main_dir), volume=_volume(line, index))
        for index, line in _section(lines, "Sound")
    ]


def read_text_configs(lines: Sequence[str]) -> list[TextConfig]:
    """Read the Text section; every line must hold a string for each language."""
    configs: list[TextConfig] = []
    for index, line in _section(lines, "Text"):
        channels = read_int_array(line, "Color")
        if len(channels) != 4:
            raise _corrupted(index)
        try:
            text_color = Color(*channels)
        except (TypeError, ValueError) as exc:
            raise _corrupted(index) from exc
        font_id = read_int(line, "FontId")
        wrap_width = read_int(line, "WrapWidth")
        if wrap_width < 0:
            raise _corrupted(index)
        language_strings: dict[Language, str] = {}
        for language in Language:
            if not is_enum_value_valid(language):
                continue
            text = read_string(line, language_to_string(language))
            if not text:
                raise _corrupted(index)
            language_strings[language] = text
        configs.append(TextConfig(
            text_color=text_color,
            font_id=font_id,
            wrap_width=wrap_width,
            language_strings=language_strings,
        ))
    return configs