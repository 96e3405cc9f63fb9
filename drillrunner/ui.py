"""Coloured status lines and text styling for terminal output."""

from __future__ import annotations

import os
import sys

_RESET = "\x1b[0m"
_BOLD = "1"
_RED = "31"
_GREEN = "32"
_BLUE = "34"


def _colors_enabled() -> bool:
    """Return whether ANSI styling should be emitted on standard output."""
    force = os.environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def _style(text: object, code: str) -> str:
    text = str(text)
    if not _colors_enabled():
        return text
    return f"\x1b[{code}m{text}{_RESET}"


def bold(text: object) -> str:
    """Return *text* rendered in bold when the terminal supports it."""
    return _style(text, _BOLD)


def blue(text: object) -> str:
    """Return *text* rendered in blue when the terminal supports it."""
    return _style(text, _BLUE)


def _red(text: object) -> str:
    return _style(text, _RED)


def _green(text: object) -> str:
    return _style(text, _GREEN)


def warn(message: str) -> None:
    """Print a red warning line."""
    symbol = "!" if _no_emoji() else "⚠️ "
    print(f"{_red(symbol)} {_red(message)}")


def success(message: str) -> None:
    """Print a green success line."""
    symbol = "✓" if _no_emoji() else "✅"
    print(f"{_green(symbol)} {_green(message)}")