"""Color & banner helpers for terminal output.

Colors are disabled when stdout is not a TTY unless FORCE_COLOR=1, and
always disabled when NO_COLOR is set.
"""
from __future__ import annotations

import os
import sys
from typing import TextIO

RESET_CODE = "0"
GREEN = "32"
RED = "31"

BANNER_TITLE = "Edu Todo App"

# ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home)
CLEAR_SEQUENCE = "\033[3J\033[H\033[2J\033[H"


def colors_enabled(stream: TextIO | None = None) -> bool:
    if os.environ.get("NO_COLOR") is not None:
        return False
    force = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    return force or bool(isatty and isatty())


def color(text: str, *codes: str, stream: TextIO | None = None) -> str:
    """Wrap text in ANSI SGR codes when the stream supports them."""
    if not codes or not colors_enabled(stream):
        return text
    return f"\033[{';'.join(codes)}m{text}\033[{RESET_CODE}m"


def green(text: str) -> str:
    return color(text, GREEN)


def red(text: str) -> str:
    return color(text, RED)


def banner(title: str = BANNER_TITLE) -> str:
    """Boxed, spaced-out title printed above every todo command."""
    spaced = " ".join(title.upper())
    rule = "=" * (len(spaced) + 4)
    return "\n".join((rule, f"| {spaced} |", rule))


def clear_screen(stream: TextIO | None = None) -> None:
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    if isatty and isatty():
        stream.write(CLEAR_SEQUENCE)
        stream.flush()
