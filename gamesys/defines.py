"""Enumerations, constants and language helpers shared across the package."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag

SECONDS_IN_MINUTE = 60
MINUTES_IN_HOUR = 60
HOURS_IN_DAY = 24
DAYS_IN_YEAR = 365

SECONDS_IN_HOUR = SECONDS_IN_MINUTE * MINUTES_IN_HOUR
SECONDS_IN_DAY = SECONDS_IN_HOUR * HOURS_IN_DAY
SECONDS_IN_YEAR = SECONDS_IN_DAY * DAYS_IN_YEAR

MINUTES_IN_DAY = MINUTES_IN_HOUR * HOURS_IN_DAY
MINUTES_IN_YEAR = MINUTES_IN_DAY * DAYS_IN_YEAR

HOURS_IN_YEAR = HOURS_IN_DAY * DAYS_IN_YEAR

TIMER_MIN_INTERVAL = 20  # milliseconds

ZERO_OPACITY = 0
FULL_OPACITY = 255
ZERO_ROTATION = 0
FULL_ROTATION = 360

ZERO_VOLUME = 0
MAX_VOLUME = 127


class WindowFlags(IntFlag):
    """Window creation flags."""

    FULLSCREEN = 0x00000001
    OPENGL = 0x00000002
    SHOWN = 0x00000004
    HIDDEN = 0x00000008
    BORDERLESS = 0x00000010
    RESIZABLE = 0x00000020
    MINIMIZED = 0x00000040
    MAXIMIZED = 0x00000080
    MOUSE_GRABBED = 0x00000100
    INPUT_FOCUS = 0x00000200
    MOUSE_FOCUS = 0x00000400
    FULLSCREEN_DESKTOP = 0x00001001
    FOREIGN = 0x00000800
    ALLOW_HIGH_DPI = 0x00002000
    MOUSE_CAPTURE = 0x00004000
    ALWAYS_ON_TOP = 0x00008000
    SKIP_TASKBAR = 0x00010000
    UTILITY = 0x00020000
    TOOLTIP = 0x00040000
    POPUP_MENU = 0x00080000
    KEYBOARD_GRABBED = 0x00100000
    VULKAN = 0x10000000
    METAL = 0x20000000


class RendererFlags(IntFlag):
    """Renderer creation flags."""

    SOFTWARE = 0x00000001
    ACCELERATED = 0x00000002
    PRESENT_VSYNC = 0x00000004
    TARGET_TEXTURE = 0x00000008


class FontWrapAlign(IntEnum):
    INVALID = -1
    LEFT = 0
    MIDDLE = 1
    RIGHT = 2
    COUNT = 3


class DrawLayer(IntEnum):
    INVALID = -1
    FIRST = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3
    FIFTH = 4
    COUNT = 5


class Language(IntEnum):
    INVALID = -1
    BG = 0
    EN = 1
    COUNT = 2


class TimerType(IntEnum):
    INVALID = -1
    ONE_SHOT = 0
    PULSE = 1
    COUNT = 2


class UnitOfTime(IntEnum):
    INVALID = -1
    NANOSECONDS = 0
    MICROSECONDS = 1
    MILLISECONDS = 2
    SECONDS = 3
    MINUTES = 4
    HOURS = 5
    DAYS = 6
    COUNT = 7


class TimeStringFormat(IntEnum):
    INVALID = -1
    YYYYMMDDHHMMSS_ZERO_PUNCTUATION = 0
    YYYYMMDDHHMMSS_DOTS = 1
    DDMMYYYYHHMMSS_ZERO_PUNCTUATION = 2
    DDMMYYYYHHMMSS_DOTS = 3
    COUNT = 4


class ConsoleTextColor(IntEnum):
    """ANSI foreground colour codes.

    COUNT is the number of colours, not an upper bound of the values, so
    is_enum_value_valid() rejects every real colour of this enum.
    """

    INVALID = -1
    DEFAULT = 37
    BLACK = 90
    RED = 91
    GREEN = 92
    YELLOW = 93
    BLUE = 94
    MAGENTA = 95
    CYAN = 96
    WHITE = 97
    COUNT = 10


class WriteMode(IntEnum):
    INVALID = -1
    OUT = 0
    APP = 1
    COUNT = 2


class ObjectType(IntEnum):
    INVALID = -1
    IMAGE = 0
    TEXT = 1
    DYNAMIC_TEXT = 2
    SOUND = 3
    MUSIC = 4
    COUNT = 5


class BlendMode(IntEnum):
    INVALID = -1
    NONE = 0
    BLEND = 1
    ADD = 2
    MOD = 3
    COUNT = 4


class FlipMode(IntEnum):
    INVALID = -1
    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2
    HORIZONTAL_AND_VERTICAL = 3
    COUNT = 4


def is_enum_value_valid(value: Enum) -> bool:
    """Return whether value lies strictly between its enum's INVALID and COUNT."""
    if not isinstance(value, Enum):
        raise TypeError(f"{value!r} is not an enum member")
    members = type(value).__members__
    if "INVALID" not in members or "COUNT" not in members:
        raise TypeError(f"{type(value).__name__} has no INVALID/COUNT bounds")
    return members["INVALID"].value < value.value < members["COUNT"].value


_LANGUAGE_NAMES = {Language.BG: "BG", Language.EN: "EN"}
_LANGUAGES_BY_NAME = {name: lang for lang, name in _LANGUAGE_NAMES.items()}


def language_from_string(text: str) -> Language:
    """Map a language code such as "EN" to its Language, or Language.INVALID."""
    return _LANGUAGES_BY_NAME.get(text, Language.INVALID)


def language_to_string(language: Language) -> str:
    """Map a Language to its code, or "" for one without a code."""
    return _LANGUAGE_NAMES.get(language, "")