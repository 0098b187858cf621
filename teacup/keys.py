"""Key presses, their names, and detection of key escape sequences."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Optional, Tuple, Union

from teacup.messages import BlurMsg, FocusMsg

__all__ = [
    "KeyType",
    "Key",
    "KeyMsg",
    "UnknownInputByteMsg",
    "UnknownCSISequenceMsg",
    "SEQUENCES",
    "detect_sequence",
    "detect_bracketed_paste",
    "detect_report_focus",
]


class KeyType(IntEnum):
    """The kind of key pressed; printable characters are RUNES."""

    # Control keys, by their C0 code.
    NULL = 0
    CTRL_AT = 0
    CTRL_A = 1
    CTRL_B = 2
    BREAK = 3
    CTRL_C = 3
    CTRL_D = 4
    CTRL_E = 5
    CTRL_F = 6
    CTRL_G = 7
    CTRL_H = 8
    TAB = 9
    CTRL_I = 9
    CTRL_J = 10
    CTRL_K = 11
    CTRL_L = 12
    ENTER = 13
    CTRL_M = 13
    CTRL_N = 14
    CTRL_O = 15
    CTRL_P = 16
    CTRL_Q = 17
    CTRL_R = 18
    CTRL_S = 19
    CTRL_T = 20
    CTRL_U = 21
    CTRL_V = 22
    CTRL_W = 23
    CTRL_X = 24
    CTRL_Y = 25
    CTRL_Z = 26
    ESC = 27
    ESCAPE = 27
    CTRL_OPEN_BRACKET = 27
    CTRL_BACKSLASH = 28
    CTRL_CLOSE_BRACKET = 29
    CTRL_CARET = 30
    CTRL_UNDERSCORE = 31
    BACKSPACE = 127
    CTRL_QUESTION_MARK = 127

    # Other keys.
    RUNES = -1
    UP = -2
    DOWN = -3
    RIGHT = -4
    LEFT = -5
    SHIFT_TAB = -6
    HOME = -7
    END = -8
    PGUP = -9
    PGDOWN = -10
    CTRL_PGUP = -11
    CTRL_PGDOWN = -12
    DELETE = -13
    INSERT = -14
    SPACE = -15
    CTRL_UP = -16
    CTRL_DOWN = -17
    CTRL_RIGHT = -18
    CTRL_LEFT = -19
    CTRL_HOME = -20
    CTRL_END = -21
    SHIFT_UP = -22
    SHIFT_DOWN = -23
    SHIFT_RIGHT = -24
    SHIFT_LEFT = -25
    SHIFT_HOME = -26
    SHIFT_END = -27
    CTRL_SHIFT_UP = -28
    CTRL_SHIFT_DOWN = -29
    CTRL_SHIFT_LEFT = -30
    CTRL_SHIFT_RIGHT = -31
    CTRL_SHIFT_HOME = -32
    CTRL_SHIFT_END = -33
    F1 = -34
    F2 = -35
    F3 = -36
    F4 = -37
    F5 = -38
    F6 = -39
    F7 = -40
    F8 = -41
    F9 = -42
    F10 = -43
    F11 = -44
    F12 = -45
    F13 = -46
    F14 = -47
    F15 = -48
    F16 = -49
    F17 = -50
    F18 = -51
    F19 = -52
    F20 = -53

    def __str__(self) -> str:
        return _KEY_NAMES.get(int(self), "")


_CONTROL_NAMES = {
    0: "ctrl+@",
    1: "ctrl+a",
    2: "ctrl+b",
    3: "ctrl+c",
    4: "ctrl+d",
    5: "ctrl+e",
    6: "ctrl+f",
    7: "ctrl+g",
    8: "ctrl+h",
    9: "tab",
    10: "ctrl+j",
    11: "ctrl+k",
    12: "ctrl+l",
    13: "enter",
    14: "ctrl+n",
    15: "ctrl+o",
    16: "ctrl+p",
    17: "ctrl+q",
    18: "ctrl+r",
    19: "ctrl+s",
    20: "ctrl+t",
    21: "ctrl+u",
    22: "ctrl+v",
    23: "ctrl+w",
    24: "ctrl+x",
    25: "ctrl+y",
    26: "ctrl+z",
    27: "esc",
    28: "ctrl+\\",
    29: "ctrl+]",
    30: "ctrl+^",
    31: "ctrl+_",
    127: "backspace",
}

_OTHER_NAMES = {
    KeyType.RUNES: "runes",
    KeyType.UP: "up",
    KeyType.DOWN: "down",
    KeyType.RIGHT: "right",
    KeyType.SPACE: " ",
    KeyType.LEFT: "left",
    KeyType.SHIFT_TAB: "shift+tab",
    KeyType.HOME: "home",
    KeyType.END: "end",
    KeyType.CTRL_HOME: "ctrl+home",
    KeyType.CTRL_END: "ctrl+end",
    KeyType.SHIFT_HOME: "shift+home",
    KeyType.SHIFT_END: "shift+end",
    KeyType.CTRL_SHIFT_HOME: "ctrl+shift+home",
    KeyType.CTRL_SHIFT_END: "ctrl+shift+end",
    KeyType.PGUP: "pgup",
    KeyType.PGDOWN: "pgdown",
    KeyType.CTRL_PGUP: "ctrl+pgup",
    KeyType.CTRL_PGDOWN: "ctrl+pgdown",
    KeyType.DELETE: "delete",
    KeyType.INSERT: "insert",
    KeyType.CTRL_UP: "ctrl+up",
    KeyType.CTRL_DOWN: "ctrl+down",
    KeyType.CTRL_RIGHT: "ctrl+right",
    KeyType.CTRL_LEFT: "ctrl+left",
    KeyType.SHIFT_UP: "shift+up",
    KeyType.SHIFT_DOWN: "shift+down",
    KeyType.SHIFT_RIGHT: "shift+right",
    KeyType.SHIFT_LEFT: "shift+left",
    KeyType.CTRL_SHIFT_UP: "ctrl+shift+up",
    KeyType.CTRL_SHIFT_DOWN: "ctrl+shift+down",
    KeyType.CTRL_SHIFT_LEFT: "ctrl+shift+left",
    KeyType.CTRL_SHIFT_RIGHT: "ctrl+shift+right",
}
_OTHER_NAMES.update({getattr(KeyType, f"F{n}"): f"f{n}" for n in range(1, 21)})

_KEY_NAMES = {**_CONTROL_NAMES, **{int(k): v for k, v in _OTHER_NAMES.items()}}


@dataclass(frozen=True)
class Key:
    """A key press: its type, the characters typed, and modifiers."""

    type: int = KeyType.NULL
    runes: str = ""
    alt: bool = False
    paste: bool = False

    def __str__(self) -> str:
        prefix = "alt+" if self.alt else ""
        if self.type == KeyType.RUNES:
            # Pastes are bracketed so they never match key bindings.
            if self.paste:
                return f"{prefix}[{self.runes}]"
            return prefix + self.runes
        name = _KEY_NAMES.get(int(self.type))
        if name is not None:
            return prefix + name
        return ""


@dataclass(frozen=True)
class KeyMsg(Key):
    """A key press delivered to the program's update function."""


@dataclass(frozen=True)
class UnknownInputByteMsg:
    """A byte on the input that is not valid UTF-8."""

    value: int

    def __str__(self) -> str:
        return f"?{self.value:#x}?"


@dataclass(frozen=True)
class UnknownCSISequenceMsg:
    """A CSI sequence on the input that is not recognised."""

    data: bytes

    def __str__(self) -> str:
        body = " ".join(str(b) for b in self.data[2:])
        return f"?CSI[{body}]?"


def _k(key_type: KeyType, alt: bool = False) -> Key:
    return Key(type=key_type, alt=alt)


K = KeyType

SEQUENCES: dict = {
    # Arrow keys
    "\x1b[A": _k(K.UP),
    "\x1b[B": _k(K.DOWN),
    "\x1b[C": _k(K.RIGHT),
    "\x1b[D": _k(K.LEFT),
    "\x1b[1;2A": _k(K.SHIFT_UP),
    "\x1b[1;2B": _k(K.SHIFT_DOWN),
    "\x1b[1;2C": _k(K.SHIFT_RIGHT),
    "\x1b[1;2D": _k(K.SHIFT_LEFT),
    "\x1b[OA": _k(K.SHIFT_UP),
    "\x1b[OB": _k(K.SHIFT_DOWN),
    "\x1b[OC": _k(K.SHIFT_RIGHT),
    "\x1b[OD": _k(K.SHIFT_LEFT),
    "\x1b[a": _k(K.SHIFT_UP),
    "\x1b[b": _k(K.SHIFT_DOWN),
    "\x1b[c": _k(K.SHIFT_RIGHT),
    "\x1b[d": _k(K.SHIFT_LEFT),
    "\x1b[1;3A": _k(K.UP, True),
    "\x1b[1;3B": _k(K.DOWN, True),
    "\x1b[1;3C": _k(K.RIGHT, True),
    "\x1b[1;3D": _k(K.LEFT, True),
    "\x1b[1;4A": _k(K.SHIFT_UP, True),
    "\x1b[1;4B": _k(K.SHIFT_DOWN, True),
    "\x1b[1;4C": _k(K.SHIFT_RIGHT, True),
    "\x1b[1;4D": _k(K.SHIFT_LEFT, True),
    "\x1b[1;5A": _k(K.CTRL_UP),
    "\x1b[1;5B": _k(K.CTRL_DOWN),
    "\x1b[1;5C": _k(K.CTRL_RIGHT),
    "\x1b[1;5D": _k(K.CTRL_LEFT),
    "\x1b[Oa": _k(K.CTRL_UP, True),
    "\x1b[Ob": _k(K.CTRL_DOWN, True),
    "\x1b[Oc": _k(K.CTRL_RIGHT, True),
    "\x1b[Od": _k(K.CTRL_LEFT, True),
    "\x1b[1;6A": _k(K.CTRL_SHIFT_UP),
    "\x1b[1;6B": _k(K.CTRL_SHIFT_DOWN),
    "\x1b[1;6C": _k(K.CTRL_SHIFT_RIGHT),
    "\x1b[1;6D": _k(K.CTRL_SHIFT_LEFT),
    "\x1b[1;7A": _k(K.CTRL_UP, True),
    "\x1b[1;7B": _k(K.CTRL_DOWN, True),
    "\x1b[1;7C": _k(K.CTRL_RIGHT, True),
    "\x1b[1;7D": _k(K.CTRL_LEFT, True),
    "\x1b[1;8A": _k(K.CTRL_SHIFT_UP, True),
    "\x1b[1;8B": _k(K.CTRL_SHIFT_DOWN, True),
    "\x1b[1;8C": _k(K.CTRL_SHIFT_RIGHT, True),
    "\x1b[1;8D": _k(K.CTRL_SHIFT_LEFT, True),
    # Miscellaneous keys
    "\x1b[Z": _k(K.SHIFT_TAB),
    "\x1b[2~": _k(K.INSERT),
    "\x1b[3;2~": _k(K.INSERT, True),
    "\x1b[3~": _k(K.DELETE),
    "\x1b[3;3~": _k(K.DELETE, True),
    "\x1b[5~": _k(K.PGUP),
    "\x1b[5;3~": _k(K.PGUP, True),
    "\x1b[5;5~": _k(K.CTRL_PGUP),
    "\x1b[5^": _k(K.CTRL_PGUP),
    "\x1b[5;7~": _k(K.CTRL_PGUP, True),
    "\x1b[6~": _k(K.PGDOWN),
    "\x1b[6;3~": _k(K.PGDOWN, True),
    "\x1b[6;5~": _k(K.CTRL_PGDOWN),
    "\x1b[6^": _k(K.CTRL_PGDOWN),
    "\x1b[6;7~": _k(K.CTRL_PGDOWN, True),
    "\x1b[1~": _k(K.HOME),
    "\x1b[H": _k(K.HOME),
    "\x1b[1;3H": _k(K.HOME, True),
    "\x1b[1;5H": _k(K.CTRL_HOME),
    "\x1b[1;7H": _k(K.CTRL_HOME, True),
    "\x1b[1;2H": _k(K.SHIFT_HOME),
    "\x1b[1;4H": _k(K.SHIFT_HOME, True),
    "\x1b[1;6H": _k(K.CTRL_SHIFT_HOME),
    "\x1b[1;8H": _k(K.CTRL_SHIFT_HOME, True),
    "\x1b[4~": _k(K.END),
    "\x1b[F": _k(K.END),
    "\x1b[1;3F": _k(K.END, True),
    "\x1b[1;5F": _k(K.CTRL_END),
    "\x1b[1;7F": _k(K.CTRL_END, True),
    "\x1b[1;2F": _k(K.SHIFT_END),
    "\x1b[1;4F": _k(K.SHIFT_END, True),
    "\x1b[1;6F": _k(K.CTRL_SHIFT_END),
    "\x1b[1;8F": _k(K.CTRL_SHIFT_END, True),
    "\x1b[7~": _k(K.HOME),
    "\x1b[7^": _k(K.CTRL_HOME),
    "\x1b[7$": _k(K.SHIFT_HOME),
    "\x1b[7@": _k(K.CTRL_SHIFT_HOME),
    "\x1b[8~": _k(K.END),
    "\x1b[8^": _k(K.CTRL_END),
    "\x1b[8$": _k(K.SHIFT_END),
    "\x1b[8@": _k(K.CTRL_SHIFT_END),
    # Function keys, Linux console
    "\x1b[[A": _k(K.F1),
    "\x1b[[B": _k(K.F2),
    "\x1b[[C": _k(K.F3),
    "\x1b[[D": _k(K.F4),
    "\x1b[[E": _k(K.F5),
    # Function keys, X11
    "\x1bOP": _k(K.F1),
    "\x1bOQ": _k(K.F2),
    "\x1bOR": _k(K.F3),
    "\x1bOS": _k(K.F4),
    "\x1b[1;3P": _k(K.F1, True),
    "\x1b[1;3Q": _k(K.F2, True),
    "\x1b[1;3R": _k(K.F3, True),
    "\x1b[1;3S": _k(K.F4, True),
    "\x1b[11~": _k(K.F1),
    "\x1b[12~": _k(K.F2),
    "\x1b[13~": _k(K.F3),
    "\x1b[14~": _k(K.F4),
    "\x1b[15~": _k(K.F5),
    "\x1b[15;3~": _k(K.F5, True),
    "\x1b[17~": _k(K.F6),
    "\x1b[18~": _k(K.F7),
    "\x1b[19~": _k(K.F8),
    "\x1b[20~": _k(K.F9),
    "\x1b[21~": _k(K.F10),
    "\x1b[17;3~": _k(K.F6, True),
    "\x1b[18;3~": _k(K.F7, True),
    "\x1b[19;3~": _k(K.F8, True),
    "\x1b[20;3~": _k(K.F9, True),
    "\x1b[21;3~": _k(K.F10, True),
    "\x1b[23~": _k(K.F11),
    "\x1b[24~": _k(K.F12),
    "\x1b[23;3~": _k(K.F11, True),
    "\x1b[24;3~": _k(K.F12, True),
    "\x1b[1;2P": _k(K.F13),
    "\x1b[1;2Q": _k(K.F14),
    "\x1b[25~": _k(K.F13),
    "\x1b[26~": _k(K.F14),
    "\x1b[25;3~": _k(K.F13, True),
    "\x1b[26;3~": _k(K.F14, True),
    "\x1b[1;2R": _k(K.F15),
    "\x1b[1;2S": _k(K.F16),
    "\x1b[28~": _k(K.F15),
    "\x1b[29~": _k(K.F16),
    "\x1b[28;3~": _k(K.F15, True),
    "\x1b[29;3~": _k(K.F16, True),
    "\x1b[15;2~": _k(K.F17),
    "\x1b[17;2~": _k(K.F18),
    "\x1b[18;2~": _k(K.F19),
    "\x1b[19;2~": _k(K.F20),
    "\x1b[31~": _k(K.F17),
    "\x1b[32~": _k(K.F18),
    "\x1b[33~": _k(K.F19),
    "\x1b[34~": _k(K.F20),
    # Powershell sequences.
    "\x1bOA": _k(K.UP),
    "\x1bOB": _k(K.DOWN),
    "\x1bOC": _k(K.RIGHT),
    "\x1bOD": _k(K.LEFT),
}

del K


def _as_msg(key: Key) -> KeyMsg:
    return KeyMsg(type=key.type, runes=key.runes, alt=key.alt, paste=key.paste)


def _build_ext_sequences() -> dict:
    """Sequences, their escape-prefixed alt forms, control chars and space.

    NUL is not included; it is handled by the caller.
    """
    table: dict = {}
    for seq, key in SEQUENCES.items():
        raw = seq.encode("latin-1")
        table[raw] = _as_msg(key)
        if not key.alt:
            table[b"\x1b" + raw] = _as_msg(replace(key, alt=True))
    for code in [*range(1, 32), 127]:
        if code == KeyType.ESC:
            continue
        key_type = KeyType(code)
        table[bytes([code])] = KeyMsg(type=key_type)
        table[bytes([0x1B, code])] = KeyMsg(type=key_type, alt=True)
    table[b" "] = KeyMsg(type=KeyType.SPACE, runes=" ")
    table[b"\x1b "] = KeyMsg(type=KeyType.SPACE, runes=" ", alt=True)
    table[b"\x1b\x1b"] = KeyMsg(type=KeyType.ESCAPE, alt=True)
    return table


_EXT_SEQUENCES = _build_ext_sequences()
_SEQ_LENGTHS = sorted({len(seq) for seq in _EXT_SEQUENCES}, reverse=True)

_UNKNOWN_CSI_RE = re.compile(rb"\A\x1b\[[\x30-\x3f]*[\x20-\x2f]*[\x40-\x7e]")

_BP_START = b"\x1b[200~"
_BP_END = b"\x1b[201~"

Detection = Optional[Tuple[int, Union[KeyMsg, UnknownCSISequenceMsg, FocusMsg, BlurMsg, None]]]


def detect_sequence(data: bytes) -> Detection:
    """Match the longest known sequence at the start of ``data``.

    Returns ``(width, msg)`` or ``None`` when nothing matches.
    """
    data = bytes(data)
    for size in _SEQ_LENGTHS:
        if size > len(data):
            continue
        msg = _EXT_SEQUENCES.get(data[:size])
        if msg is not None:
            return size, msg
    match = _UNKNOWN_CSI_RE.match(data)
    if match is not None:
        end = match.end()
        return end, UnknownCSISequenceMsg(data[:end])
    return None


def detect_bracketed_paste(data: bytes) -> Detection:
    """Detect a bracketed paste at the start of ``data``.

    Returns ``None`` if no paste starts here, ``(0, None)`` if the paste
    has not ended yet and more input is needed, else ``(width, msg)``.
    """
    data = bytes(data)
    if not data.startswith(_BP_START):
        return None
    idx = data.find(_BP_END, len(_BP_START))
    if idx == -1:
        return 0, None
    paste = data[len(_BP_START):idx]
    text = paste.decode("utf-8", errors="ignore").replace("\ufffd", "")
    return idx + len(_BP_END), KeyMsg(type=KeyType.RUNES, runes=text, paste=True)


def detect_report_focus(data: bytes) -> Detection:
    """Detect a focus or blur report making up the whole of ``data``."""
    data = bytes(data)
    if data == b"\x1b[I":
        return 3, FocusMsg()
    if data == b"\x1b[O":
        return 3, BlurMsg()
    return None