"""Mouse events and the parsers for X10 and SGR mouse reports."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "MouseAction",
    "MouseButton",
    "MouseEventType",
    "MouseEvent",
    "MouseMsg",
    "MOUSE_SGR_RE",
    "X10_MOUSE_BYTE_OFFSET",
    "parse_sgr_mouse_event",
    "parse_x10_mouse_event",
    "parse_mouse_button",
]

MOUSE_SGR_RE = re.compile(rb"(\d+);(\d+);(\d+)([Mm])")
X10_MOUSE_BYTE_OFFSET = 32

_BIT_SHIFT = 0b0000_0100
_BIT_ALT = 0b0000_1000
_BIT_CTRL = 0b0001_0000
_BIT_MOTION = 0b0010_0000
_BIT_WHEEL = 0b0100_0000
_BIT_ADD = 0b1000_0000
_BITS_MASK = 0b0000_0011


class MouseAction(IntEnum):
    """What happened during a mouse event."""

    PRESS = 0
    RELEASE = 1
    MOTION = 2


class MouseButton(IntEnum):
    """The button involved in a mouse event, after X11 button codes."""

    NONE = 0
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5
    WHEEL_LEFT = 6
    WHEEL_RIGHT = 7
    BACKWARD = 8
    FORWARD = 9
    BUTTON_10 = 10
    BUTTON_11 = 11


class MouseEventType(IntEnum):
    """Legacy classification of a mouse event; prefer action and button."""

    UNKNOWN = 0
    LEFT = 1
    RIGHT = 2
    MIDDLE = 3
    RELEASE = 4
    WHEEL_UP = 5
    WHEEL_DOWN = 6
    WHEEL_LEFT = 7
    WHEEL_RIGHT = 8
    BACKWARD = 9
    FORWARD = 10
    MOTION = 11


_ACTION_NAMES = {
    MouseAction.PRESS: "press",
    MouseAction.RELEASE: "release",
    MouseAction.MOTION: "motion",
}

_BUTTON_NAMES = {
    MouseButton.NONE: "none",
    MouseButton.LEFT: "left",
    MouseButton.MIDDLE: "middle",
    MouseButton.RIGHT: "right",
    MouseButton.WHEEL_UP: "wheel up",
    MouseButton.WHEEL_DOWN: "wheel down",
    MouseButton.WHEEL_LEFT: "wheel left",
    MouseButton.WHEEL_RIGHT: "wheel right",
    MouseButton.BACKWARD: "backward",
    MouseButton.FORWARD: "forward",
    MouseButton.BUTTON_10: "button 10",
    MouseButton.BUTTON_11: "button 11",
}

_WHEEL_BUTTONS = frozenset(
    {
        MouseButton.WHEEL_UP,
        MouseButton.WHEEL_DOWN,
        MouseButton.WHEEL_LEFT,
        MouseButton.WHEEL_RIGHT,
    }
)

_PRESS_TYPES = {
    MouseButton.LEFT: MouseEventType.LEFT,
    MouseButton.MIDDLE: MouseEventType.MIDDLE,
    MouseButton.RIGHT: MouseEventType.RIGHT,
    MouseButton.WHEEL_UP: MouseEventType.WHEEL_UP,
    MouseButton.WHEEL_DOWN: MouseEventType.WHEEL_DOWN,
    MouseButton.WHEEL_LEFT: MouseEventType.WHEEL_LEFT,
    MouseButton.WHEEL_RIGHT: MouseEventType.WHEEL_RIGHT,
    MouseButton.BACKWARD: MouseEventType.BACKWARD,
    MouseButton.FORWARD: MouseEventType.FORWARD,
}

_MOTION_TYPES = {
    MouseButton.LEFT: MouseEventType.LEFT,
    MouseButton.MIDDLE: MouseEventType.MIDDLE,
    MouseButton.RIGHT: MouseEventType.RIGHT,
    MouseButton.BACKWARD: MouseEventType.BACKWARD,
    MouseButton.FORWARD: MouseEventType.FORWARD,
}


@dataclass
class MouseEvent:
    """A click, wheel movement, cursor movement, or a combination."""

    x: int = 0
    y: int = 0
    shift: bool = False
    alt: bool = False
    ctrl: bool = False
    action: int = MouseAction.PRESS
    button: int = MouseButton.NONE
    type: int = MouseEventType.UNKNOWN

    def is_wheel(self) -> bool:
        """Whether the event comes from a scroll wheel."""
        return self.button in _WHEEL_BUTTONS

    def __str__(self) -> str:
        s = ""
        if self.ctrl:
            s += "ctrl+"
        if self.alt:
            s += "alt+"
        if self.shift:
            s += "shift+"

        if self.button == MouseButton.NONE:
            if self.action in (MouseAction.MOTION, MouseAction.RELEASE):
                s += _ACTION_NAMES[self.action]
            else:
                s += "unknown"
        elif self.is_wheel():
            s += _BUTTON_NAMES[self.button]
        else:
            s += _BUTTON_NAMES.get(self.button, "")
            action = _ACTION_NAMES.get(self.action, "")
            if action:
                s += " " + action
        return s


@dataclass
class MouseMsg(MouseEvent):
    """A mouse event delivered to the program's update function."""


def parse_mouse_button(b: int, is_sgr: bool) -> MouseEvent:
    """Decode an encoded button byte into an event without coordinates."""
    m = MouseEvent()
    e = b if is_sgr else b - X10_MOUSE_BYTE_OFFSET

    if e & _BIT_ADD:
        m.button = MouseButton(MouseButton.BACKWARD + (e & _BITS_MASK))
    elif e & _BIT_WHEEL:
        m.button = MouseButton(MouseButton.WHEEL_UP + (e & _BITS_MASK))
    else:
        m.button = MouseButton(MouseButton.LEFT + (e & _BITS_MASK))
        # X10 reports a button release as 0b11.
        if e & _BITS_MASK == _BITS_MASK:
            m.action = MouseAction.RELEASE
            m.button = MouseButton.NONE

    # Wheel events never carry the motion bit.
    if e & _BIT_MOTION and not m.is_wheel():
        m.action = MouseAction.MOTION

    m.alt = bool(e & _BIT_ALT)
    m.ctrl = bool(e & _BIT_CTRL)
    m.shift = bool(e & _BIT_SHIFT)

    if m.action == MouseAction.PRESS and m.button in _PRESS_TYPES:
        m.type = _PRESS_TYPES[m.button]
    elif m.button == MouseButton.NONE and m.action == MouseAction.RELEASE:
        m.type = MouseEventType.RELEASE
    elif m.action == MouseAction.MOTION:
        m.type = _MOTION_TYPES.get(m.button, MouseEventType.MOTION)
    else:
        m.type = MouseEventType.UNKNOWN
    return m


def parse_sgr_mouse_event(buf: bytes) -> MouseEvent:
    """Parse an SGR mouse report: ESC [ < Cb ; Cx ; Cy (M or m)."""
    match = MOUSE_SGR_RE.search(bytes(buf[3:]))
    if match is None:
        raise ValueError(f"invalid SGR mouse event: {bytes(buf)!r}")

    code, px, py, final = match.groups()
    release = final == b"m"
    m = parse_mouse_button(int(code), True)

    # Wheels have no release; some terminals report motion as a release.
    if m.action != MouseAction.MOTION and not m.is_wheel() and release:
        m.action = MouseAction.RELEASE
        m.type = MouseEventType.RELEASE

    # (1,1) is the upper left; normalise to (0,0).
    m.x = int(px) - 1
    m.y = int(py) - 1
    return m


def parse_x10_mouse_event(buf: bytes) -> MouseEvent:
    """Parse an X10 mouse report: ESC [ M Cb Cx Cy."""
    if len(buf) < 6:
        raise ValueError(f"X10 mouse event too short: {bytes(buf)!r}")
    code, cx, cy = buf[3], buf[4], buf[5]
    m = parse_mouse_button(code, False)
    m.x = cx - X10_MOUSE_BYTE_OFFSET - 1
    m.y = cy - X10_MOUSE_BYTE_OFFSET - 1
    return m