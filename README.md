# gamesys

Building blocks for 2D games and the engines under them, in plain Python
with no third-party dependencies.

## Modules

- `gamesys.defines` holds the shared enumerations: `WindowFlags`,
  `RendererFlags`, `FontWrapAlign`, `DrawLayer`, `Language`, `TimerType`,
  `UnitOfTime`, `TimeStringFormat`, `ConsoleTextColor`, `WriteMode`,
  `ObjectType`, `BlendMode` and `FlipMode`. It also holds time, opacity,
  rotation and volume constants, plus `is_enum_value_valid`, which checks
  that a member lies strictly between its enum's `INVALID` and `COUNT`.
  `language_from_string` and `language_to_string` convert between
  `Language` and codes such as `"EN"`.
- `gamesys.color` provides `Color`, a frozen RGBA value. `Color()` is
  transparent black and `Color(r, g, b)` is opaque. The module also defines
  a palette of named colours such as `BLACK`, `WHITE`, `SKY_BLUE` and
  `VERY_DARK_RED`.
- `gamesys.geometry` provides `Point`, `Rectangle` and `Circle`, each with
  `ZERO` and `UNDEFINED` values. `Rectangle.contains` counts points on the
  edges as inside. `Circle.contains` truncates the distance to a whole
  number before comparing it with the radius.
- `gamesys.position` places one rectangle inside another. It has
  `top_left`, `top_center`, `top_right`, `middle_left`, `middle_center`,
  `middle_right`, `bottom_left`, `bottom_center` and `bottom_right`.
- `gamesys.hashed_string` provides `jenkins_hash`, a 32-bit one-at-a-time
  hash, and `HashedString`, a string that carries its hash and compares by
  that hash.
- `gamesys.crypto` has byte-shifting ciphers on `bytes`: `caesar_encrypt`
  and `caesar_decrypt`, and their moving variants. The random-offset
  variants return the offsets that decryption needs, and one of them can
  add filler bytes. `invert_bits` flips every bit.
- `gamesys.config_reader` reads values from `Key=value;` records. It has
  `read_int`, `read_int_array`, `read_double`, `read_double_array`,
  `read_string` and `read_string_array`, plus `read_string_hashed` and
  `read_string_array_hashed`. In strings a backslash escapes the next
  character, and `\n` and `\t` become a newline and a tab. A missing key or
  a bad value raises `ConfigError`.
- `gamesys.read_write_file` has `read_lines` and `read_text`, which skip
  empty lines and lines starting with `#`. `write_text` overwrites a file
  with `WriteMode.OUT` or appends to it with `WriteMode.APP`.
- `gamesys.clock` provides `Time`, a count of microseconds since the Unix
  epoch. It has `now`, `set_to_now`, `get_as`, `elapsed_till_now` and
  `format`, which renders local time in one of the `TimeStringFormat`
  layouts.
- `gamesys.log` has `console`, `console_colored`, `console_warning` and
  `console_error`, which write printf-style messages to stderr with ANSI
  colours. `write_file` appends or writes text to a file.
  `report_assertion` prints a red report or appends it to a time-stamped
  file in a log directory.
- `gamesys.random_generator` provides `RandomNumberGenerator`, a seedable
  64-bit generator. It has `generate_uint64`, `generate_int64` and
  `generate_double`; ranges are half-open.
- `gamesys.timers` provides `TimerContainer`, which holds one-shot and
  pulse timers (`TimerData`) advanced in milliseconds by `update(dt)`. A
  one-shot timer is removed once `is_ticked` has reported its tick.
- `gamesys.parameters` provides `DrawParameters` and `AudioParameters`,
  each with `reset()`.
- `gamesys.rasterize` has `circle_outline_points` and
  `filled_circle_points`, which yield the pixels of a circle as `Point`s.
- `gamesys.event_defines` defines the codes `EventType`, `KeyboardKey`,
  `Keymod`, `Scancode`, `MouseKey` and `MouseWheel`.
- `gamesys.binary_struct` provides `BinaryStruct`, which looks up hashed
  entries in a little-endian binary blob. It has `from_file`, `get_raw`,
  `get_int32` and `get_string`.
- `gamesys.display_config` provides `RendererConfig.read` and
  `WindowConfig.read`. Each takes config lines, where the first line maps
  section names to line indexes. Each returns `None`, with a warning, when
  its section is absent.
- `gamesys.asset_configs` has `read_font_configs`, `read_image_configs`,
  `read_music_configs`, `read_sound_configs` and `read_text_configs`. They
  return lists of `FontConfig`, `ImageConfig`, `MusicConfig`, `SoundConfig`
  and `TextConfig`.

## Examples

Centre a button on the screen:

```python
from gamesys.geometry import Rectangle
from gamesys.position import middle_center

button = Rectangle(0, 0, 100, 40)
screen = Rectangle(0, 0, 800, 600)
print(middle_center(button, screen))   # Point(x=350, y=280)
```

Read values from a config line:

```python
from gamesys.config_reader import read_int, read_string

line = "Type=Font;FileName=fonts/main.ttf;Size=24;"
print(read_int(line, "Size"))          # 24
print(read_string(line, "FileName"))   # fonts/main.ttf
```

Drive a pulse timer:

```python
from gamesys.defines import TimerType
from gamesys.timers import TimerContainer

timers = TimerContainer()
tid = timers.start_timer(100, TimerType.PULSE)
timers.update(150)
print(timers.is_ticked(tid))  # True
```

## What it does not do

The package does not open windows, render, play audio, poll input or load
image, font or sound files. It defines the flags, event codes, parameters
and configuration records such a layer would use, but leaves drawing and
playback to whatever library the game is built on.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```