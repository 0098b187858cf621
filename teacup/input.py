"""Turn raw terminal input into key, mouse and focus messages."""

from __future__ import annotations

from typing import BinaryIO, Iterator, Optional, Tuple

from teacup.keys import (
    KeyMsg,
    KeyType,
    UnknownInputByteMsg,
    detect_bracketed_paste,
    detect_report_focus,
    detect_sequence,
)
from teacup.mouse import (
    MOUSE_SGR_RE,
    MouseEvent,
    MouseMsg,
    parse_sgr_mouse_event,
    parse_x10_mouse_event,
)

__all__ = ["detect_one_msg", "read_ansi_inputs", "read_inputs"]

_BUFFER_SIZE = 256
_MOUSE_EVENT_X10_LEN = 6
_ESC = 0x1B
_US = 0x1F
_DEL = 0x7F


def _to_mouse_msg(event: MouseEvent) -> MouseMsg:
    return MouseMsg(**vars(event))


def _decode_rune(data: bytes, start: int) -> Tuple[Optional[str], int]:
    """Decode one UTF-8 character at ``start``.

    Returns ``(char, width)``, or ``(None, 1)`` for an invalid byte.
    """
    lead = data[start]
    if lead < 0x80:
        size = 1
    elif 0xC2 <= lead <= 0xDF:
        size = 2
    elif 0xE0 <= lead <= 0xEF:
        size = 3
    elif 0xF0 <= lead <= 0xF4:
        size = 4
    else:
        return None, 1
    chunk = data[start:start + size]
    if len(chunk) < size:
        return None, 1
    try:
        return chunk.decode("utf-8"), size
    except UnicodeDecodeError:
        return None, 1


def _is_rune_stop(char: Optional[str]) -> bool:
    if char is None or char == "\ufffd":
        return True
    code = ord(char)
    return code <= _US or code == _DEL or char == " "


def detect_one_msg(data: bytes, can_have_more_data: bool):
    """Detect the first message at the start of ``data``.

    Returns ``(width, msg)``. A width of 0 means the input ends in the
    middle of a message and more bytes are needed.
    """
    data = bytes(data)
    if not data:
        raise ValueError("no input to detect a message in")

    # Mouse events.
    if len(data) >= _MOUSE_EVENT_X10_LEN and data[0] == _ESC and data[1] == ord("["):
        if data[2] == ord("M"):
            return _MOUSE_EVENT_X10_LEN, _to_mouse_msg(parse_x10_mouse_event(data))
        if data[2] == ord("<"):
            match = MOUSE_SGR_RE.search(data, 3)
            if match is not None:
                return match.end(), _to_mouse_msg(parse_sgr_mouse_event(data))

    for detector in (detect_report_focus, detect_bracketed_paste, detect_sequence):
        found = detector(data)
        if found is not None:
            return found

    # No non-NUL control character or escape sequence; an escape in front
    # marks the alt modifier.
    alt = data[0] == _ESC
    i = 1 if alt else 0

    if i < len(data) and data[i] == 0:
        return i + 1, KeyMsg(type=KeyType.NULL, alt=alt)

    # The longest run of characters that are not control characters.
    runes = []
    while i < len(data):
        char, width = _decode_rune(data, i)
        if _is_rune_stop(char):
            break
        runes.append(char)
        i += width
        if alt:
            # Only a single character follows an alt escape.
            break

    if i >= len(data) and can_have_more_data:
        return 0, None

    if runes:
        text = "".join(runes)
        key_type = KeyType.SPACE if text == " " else KeyType.RUNES
        return i, KeyMsg(type=key_type, runes=text, alt=alt)

    if alt and len(data) == 1:
        return 1, KeyMsg(type=KeyType.ESCAPE)

    return 1, UnknownInputByteMsg(data[0])


def read_ansi_inputs(stream: BinaryIO) -> Iterator[object]:
    """Yield the messages read from a binary stream until it ends."""
    read = getattr(stream, "read1", None) or stream.read
    leftover = b""
    while True:
        chunk = read(_BUFFER_SIZE)
        if not chunk:
            return
        data = leftover + bytes(chunk)
        leftover = b""
        # A full buffer may stop in the middle of a message.
        can_have_more_data = len(chunk) == _BUFFER_SIZE

        pos = 0
        while pos < len(data):
            width, msg = detect_one_msg(data[pos:], can_have_more_data)
            if width == 0:
                leftover = data[pos:]
                break
            yield msg
            pos += width


def read_inputs(stream: BinaryIO) -> Iterator[object]:
    """Yield the messages read from the terminal input stream."""
    yield from read_ansi_inputs(stream)