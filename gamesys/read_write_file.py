"""Reading config-style text files and writing text files."""

from __future__ import annotations

import os

from gamesys.defines import WriteMode

COMMENT_MARK = "#"

_OPEN_MODES = {WriteMode.OUT: "w", WriteMode.APP: "a"}


def read_lines(file_name: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a file, leaving out empty lines and lines starting with '#'."""
    with open(file_name, encoding="utf-8") as stream:
        lines = (raw[:-1] if raw.endswith("\n") else raw for raw in stream)
        return [line for line in lines if line and not line.startswith(COMMENT_MARK)]


def read_text(file_name: str | os.PathLike[str]) -> str:
    """Return the lines kept by read_lines joined with nothing between them."""
    return "".join(read_lines(file_name))


def write_text(file_name: str | os.PathLike[str], text: str, mode: WriteMode) -> None:
    """Write text to a file, replacing it (WriteMode.OUT) or appending (WriteMode.APP)."""
    try:
        open_mode = _OPEN_MODES[mode]
    except KeyError:
        raise ValueError(f"unsupported write mode: {mode!r}") from None
    with open(file_name, open_mode, encoding="utf-8") as stream:
        stream.write(text)