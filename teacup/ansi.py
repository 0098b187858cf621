"""ANSI escape sequences and width helpers used by the renderers."""

from __future__ import annotations

import re
from typing import Iterator, Tuple

from wcwidth import wcwidth

__all__ = [
    "ERASE_ENTIRE_LINE",
    "ERASE_LINE_RIGHT",
    "ERASE_ENTIRE_SCREEN",
    "ERASE_SCREEN_BELOW",
    "CURSOR_HOME_POSITION",
    "CUU1",
    "SHOW_CURSOR",
    "HIDE_CURSOR",
    "SET_ALT_SCREEN_SAVE_CURSOR_MODE",
    "RESET_ALT_SCREEN_SAVE_CURSOR_MODE",
    "SET_BUTTON_EVENT_MOUSE_MODE",
    "RESET_BUTTON_EVENT_MOUSE_MODE",
    "SET_ANY_EVENT_MOUSE_MODE",
    "RESET_ANY_EVENT_MOUSE_MODE",
    "SET_SGR_EXT_MOUSE_MODE",
    "RESET_SGR_EXT_MOUSE_MODE",
    "SET_BRACKETED_PASTE_MODE",
    "RESET_BRACKETED_PASTE_MODE",
    "SET_FOCUS_EVENT_MODE",
    "RESET_FOCUS_EVENT_MODE",
    "string_width",
    "truncate",
    "cursor_up",
    "cursor_backward",
    "cursor_position",
    "set_top_bottom_margins",
    "insert_line",
    "set_window_title",
]

ERASE_ENTIRE_LINE = "\x1b[2K"
ERASE_LINE_RIGHT = "\x1b[K"
ERASE_ENTIRE_SCREEN = "\x1b[2J"
ERASE_SCREEN_BELOW = "\x1b[J"
CURSOR_HOME_POSITION = "\x1b[H"
CUU1 = "\x1b[A"
SHOW_CURSOR = "\x1b[?25h"
HIDE_CURSOR = "\x1b[?25l"
SET_ALT_SCREEN_SAVE_CURSOR_MODE = "\x1b[?1049h"
RESET_ALT_SCREEN_SAVE_CURSOR_MODE = "\x1b[?1049l"
SET_BUTTON_EVENT_MOUSE_MODE = "\x1b[?1002h"
RESET_BUTTON_EVENT_MOUSE_MODE = "\x1b[?1002l"
SET_ANY_EVENT_MOUSE_MODE = "\x1b[?1003h"
RESET_ANY_EVENT_MOUSE_MODE = "\x1b[?1003l"
SET_SGR_EXT_MOUSE_MODE = "\x1b[?1006h"
RESET_SGR_EXT_MOUSE_MODE = "\x1b[?1006l"
SET_BRACKETED_PASTE_MODE = "\x1b[?2004h"
RESET_BRACKETED_PASTE_MODE = "\x1b[?2004l"
SET_FOCUS_EVENT_MODE = "\x1b[?1004h"
RESET_FOCUS_EVENT_MODE = "\x1b[?1004l"

_ESCAPE_RE = re.compile(
    r"\x1b(?:"
    r"\[[\x30-\x3f]*[\x20-\x2f]*[\x40-\x7e]"  # CSI
    r"|\][^\x07\x1b]*(?:\x07|\x1b\\)"  # OSC
    r"|[PX^_][^\x1b]*\x1b\\"  # DCS, SOS, PM, APC
    r"|[\x20-\x2f]*[\x30-\x7e]"  # other escapes
    r")"
)


def _tokens(s: str) -> Iterator[Tuple[str, bool]]:
    """Split ``s`` into escape sequences and single characters."""
    pos = 0
    while pos < len(s):
        match = _ESCAPE_RE.match(s, pos)
        if match is not None:
            yield match.group(), True
            pos = match.end()
        else:
            yield s[pos], False
            pos += 1


def _char_width(ch: str) -> int:
    return max(wcwidth(ch), 0)


def string_width(s: str) -> int:
    """The number of terminal cells ``s`` occupies, ignoring escape sequences."""
    return sum(_char_width(text) for text, is_escape in _tokens(s) if not is_escape)


def truncate(s: str, length: int, tail: str = "") -> str:
    """Cut ``s`` to ``length`` cells, keeping escape sequences, adding ``tail``."""
    if length <= 0:
        return ""
    if string_width(s) <= length:
        return s

    limit = length - string_width(tail)
    out = []
    width = 0
    cut = False
    for text, is_escape in _tokens(s):
        if is_escape:
            out.append(text)
            continue
        if cut:
            continue
        w = _char_width(text)
        if width + w > limit:
            cut = True
            out.append(tail)
            continue
        out.append(text)
        width += w
    return "".join(out)


def _count(n: int) -> str:
    return str(n) if n > 1 else ""


def cursor_up(n: int) -> str:
    """Move the cursor up ``n`` lines."""
    return f"\x1b[{_count(n)}A"


def cursor_backward(n: int) -> str:
    """Move the cursor left ``n`` columns."""
    return f"\x1b[{_count(n)}D"


def cursor_position(col: int, row: int) -> str:
    """Move the cursor to ``col``, ``row`` (1-based; 0 means omitted)."""
    if col <= 0 and row <= 0:
        return CURSOR_HOME_POSITION
    r = str(row) if row > 0 else ""
    c = str(col) if col > 0 else ""
    return f"\x1b[{r};{c}H"


def set_top_bottom_margins(top: int, bottom: int) -> str:
    """Set the scrolling region (DECSTBM)."""
    t = str(top) if top > 0 else ""
    b = str(bottom) if bottom > 0 else ""
    return f"\x1b[{t};{b}r"


def insert_line(n: int) -> str:
    """Insert ``n`` blank lines at the cursor."""
    return f"\x1b[{_count(n)}L"


def set_window_title(title: str) -> str:
    """Set the terminal window title."""
    return f"\x1b]2;{title}\x07"