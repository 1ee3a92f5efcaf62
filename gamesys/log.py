"""Coloured console messages, log files and assertion reports."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TextIO

from gamesys.clock import Time
from gamesys.defines import ConsoleTextColor, TimeStringFormat, WriteMode

ASSERT_BANNER = "--- ASSERT TRIGGERED ---\n"

_assert_log_files: dict[Path, Path] = {}


def _format(fmt: str, args: tuple[object, ...]) -> str:
    return fmt % args if args else fmt


def console_set_text_color(color: ConsoleTextColor, stream: TextIO | None = None) -> None:
    """Write the ANSI escape that switches the text colour (to stdout by default)."""
    out = sys.stdout if stream is None else stream
    out.write(f"\033[{int(color)}m")


def console(fmt: str, *args: object) -> None:
    """Print a printf-style formatted message and a newline to stderr."""
    sys.stderr.write(_format(fmt, args) + "\n")


def console_colored(color: ConsoleTextColor, fmt: str, *args: object) -> None:
    """Print a message to stderr in the given colour, then restore the default colour."""
    console_set_text_color(color, sys.stderr)
    console(fmt, *args)
    console_set_text_color(ConsoleTextColor.DEFAULT, sys.stderr)


def console_warning(fmt: str, *args: object) -> None:
    """Print a yellow message prefixed with 'WARNING! '."""
    console_colored(ConsoleTextColor.YELLOW, "WARNING! " + _format(fmt, args))


def console_error(fmt: str, *args: object) -> None:
    """Print a red message prefixed with 'ERROR! '."""
    console_colored(ConsoleTextColor.RED, "ERROR! " + _format(fmt, args))


def write_file(file_name: str | os.PathLike[str], text: str,
               mode: WriteMode = WriteMode.APP) -> bool:
    """Append text to a file (or replace it unless mode is APP).

    Returns False, without raising, when the file cannot be opened.
    """
    open_mode = "a" if mode == WriteMode.APP else "w"
    try:
        with open(file_name, open_mode, encoding="utf-8") as stream:
            stream.write(text)
    except OSError:
        return False
    return True


def report_assertion(text: str, log_dir: str | os.PathLike[str] | None = None) -> Path | None:
    """Report a failed check.

    Without log_dir the report goes to the console in red. With log_dir it is
    appended to a file named after the time of the first report made to that
    directory, and the file's path is returned.
    """
    if log_dir is None:
        console_colored(ConsoleTextColor.RED, ASSERT_BANNER)
        console_colored(ConsoleTextColor.RED, text)
        return None

    directory = Path(log_dir)
    log_file = _assert_log_files.get(directory)
    if log_file is None:
        stamp = Time.now().format(TimeStringFormat.YYYYMMDDHHMMSS_ZERO_PUNCTUATION)
        log_file = directory / f"{stamp}.log"
        _assert_log_files[directory] = log_file
    directory.mkdir(parents=True, exist_ok=True)
    write_file(log_file, text + "\n", WriteMode.APP)
    return log_file