"""Text, console and JSON helpers."""

from __future__ import annotations

import enum
import json
import sys
import time
from collections.abc import Iterable
from pathlib import Path
from typing import Any


class ConsoleColor(enum.IntFlag):
    """Console character attribute bits."""

    FOREGROUND_BLUE = 0x0001
    FOREGROUND_GREEN = 0x0002
    FOREGROUND_RED = 0x0004
    FOREGROUND_INTENSITY = 0x0008
    BACKGROUND_BLUE = 0x0010
    BACKGROUND_GREEN = 0x0020
    BACKGROUND_RED = 0x0040
    BACKGROUND_INTENSITY = 0x0080


def read_string_from_file(file_name: str | Path) -> str:
    """Return the file's contents decoded as UTF-8, line endings untouched."""
    return Path(file_name).read_bytes().decode("utf-8")


def parse_string_pos(text: str, start: int, end: int) -> str:
    """Return ``text[start..end]`` inclusive.

    When ``end`` lies more than one before ``start`` the rest of the string
    from ``start`` is returned.
    """
    if start > len(text):
        raise IndexError(f"start position {start} beyond length {len(text)}")
    count = end - start + 1
    if count < 0:
        return text[start:]
    return text[start : start + count]


def is_in(content: Any, items: Iterable[Any]) -> bool:
    return content in items


def delay_print(text: str, ms: int = 50) -> None:
    """Write ``text`` to stdout one character at a time, pausing ``ms`` each."""
    for ch in text:
        sys.stdout.write(ch)
        sys.stdout.flush()
        time.sleep(ms / 1000)


def _ansi_index(red: bool, green: bool, blue: bool) -> int:
    return int(red) + 2 * int(green) + 4 * int(blue)


def colorful_print(text: str, attributes: int) -> None:
    """Write ``text`` in the colours given by console attribute bits, then reset."""
    flags = ConsoleColor(attributes & 0xFF)
    fg = _ansi_index(
        ConsoleColor.FOREGROUND_RED in flags,
        ConsoleColor.FOREGROUND_GREEN in flags,
        ConsoleColor.FOREGROUND_BLUE in flags,
    )
    fg_base = 90 if ConsoleColor.FOREGROUND_INTENSITY in flags else 30
    codes = [str(fg_base + fg)]
    background_bits = (
        ConsoleColor.BACKGROUND_RED
        | ConsoleColor.BACKGROUND_GREEN
        | ConsoleColor.BACKGROUND_BLUE
        | ConsoleColor.BACKGROUND_INTENSITY
    )
    if flags & background_bits:
        bg = _ansi_index(
            ConsoleColor.BACKGROUND_RED in flags,
            ConsoleColor.BACKGROUND_GREEN in flags,
            ConsoleColor.BACKGROUND_BLUE in flags,
        )
        bg_base = 100 if ConsoleColor.BACKGROUND_INTENSITY in flags else 40
        codes.append(str(bg_base + bg))
    sys.stdout.write(f"\x1b[{';'.join(codes)}m{text}\x1b[0m")
    sys.stdout.flush()


def read_json_from_string(json_string: str) -> Any:
    """Parse a JSON document; None if it is not valid JSON."""
    try:
        return json.loads(json_string)
    except json.JSONDecodeError:
        return None