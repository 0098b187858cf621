import io

import pytest

from teacup.input import detect_one_msg, read_ansi_inputs, read_inputs
from teacup.keys import (
    SEQUENCES,
    KeyMsg,
    KeyType,
    UnknownCSISequenceMsg,
    UnknownInputByteMsg,
)
from teacup.messages import BlurMsg, FocusMsg
from teacup.mouse import MouseAction, MouseButton, MouseEventType, MouseMsg


def _base_seq_cases():
    cases = []
    for seq, key in SEQUENCES.items():
        raw = seq.encode("latin-1")
        cases.append((raw, KeyMsg(type=key.type, alt=key.alt)))
        if not key.alt:
            cases.append((b"\x1b" + raw, KeyMsg(type=key.type, alt=True)))
    for code in [*range(1, 32), 127]:
        if code == 27:
            continue
        cases.append((bytes([code]), KeyMsg(type=KeyType(code))))
        cases.append((bytes([0x1B, code]), KeyMsg(type=KeyType(code), alt=True)))
    cases += [
        (b"\x1b[----X", UnknownCSISequenceMsg(b"\x1b[----X")),
        (b" ", KeyMsg(type=KeyType.SPACE, runes=" ")),
        (b"\x1b ", KeyMsg(type=KeyType.SPACE, runes=" ", alt=True)),
    ]
    return cases


_EXTRA_CASES = [
    (b"\x1b[I", FocusMsg()),
    (b"\x1b[O", BlurMsg()),
    (
        bytes([0x1B, ord("["), ord("M"), 32 + 0b0100_0000, 65, 49]),
        MouseMsg(
            x=32,
            y=16,
            type=MouseEventType.WHEEL_UP,
            button=MouseButton.WHEEL_UP,
            action=MouseAction.PRESS,
        ),
    ),
    (
        b"\x1b[<0;33;17M",
        MouseMsg(
            x=32,
            y=16,
            type=MouseEventType.LEFT,
            button=MouseButton.LEFT,
            action=MouseAction.PRESS,
        ),
    ),
    (b"a", KeyMsg(type=KeyType.RUNES, runes="a")),
    (b"\x1ba", KeyMsg(type=KeyType.RUNES, runes="a", alt=True)),
    (b"aaa", KeyMsg(type=KeyType.RUNES, runes="aaa")),
    ("☃".encode(), KeyMsg(type=KeyType.RUNES, runes="☃")),
    (b"\x1b" + "☃".encode(), KeyMsg(type=KeyType.RUNES, runes="☃", alt=True)),
    (b"\x1b", KeyMsg(type=KeyType.ESCAPE)),
    (b"\x01", KeyMsg(type=KeyType.CTRL_A)),
    (b"\x1b\x01", KeyMsg(type=KeyType.CTRL_A, alt=True)),
    (b"\x00", KeyMsg(type=KeyType.CTRL_AT)),
    (b"\x1b\x00", KeyMsg(type=KeyType.CTRL_AT, alt=True)),
    (b"\x80", UnknownInputByteMsg(0x80)),
    (b"\xfe", UnknownInputByteMsg(0xFE)),
]


@pytest.mark.parametrize(
    "seq,expected",
    _base_seq_cases() + _EXTRA_CASES,
    ids=lambda v: repr(v) if isinstance(v, bytes) else "",
)
def test_detect_one_msg(seq, expected):
    width, msg = detect_one_msg(seq, False)
    assert width == len(seq)
    assert msg == expected


def test_detect_one_msg_wants_more_data_at_buffer_end():
    assert detect_one_msg(b"abc", True) == (0, None)


def test_detect_one_msg_incomplete_paste_wants_more():
    assert detect_one_msg(b"\x1b[200~abc", False) == (0, None)


def test_detect_one_msg_empty_input_raises():
    with pytest.raises(ValueError):
        detect_one_msg(b"", False)


def _m(x, y, type_, button, action):
    return MouseMsg(x=x, y=y, type=type_, button=button, action=action)


_READ_CASES = [
    ("a", b"a", [KeyMsg(type=KeyType.RUNES, runes="a")]),
    (" ", b" ", [KeyMsg(type=KeyType.SPACE, runes=" ")]),
    (
        "a alt+a",
        b"a\x1ba",
        [
            KeyMsg(type=KeyType.RUNES, runes="a"),
            KeyMsg(type=KeyType.RUNES, runes="a", alt=True),
        ],
    ),
    (
        "a alt+a a",
        b"a\x1baa",
        [
            KeyMsg(type=KeyType.RUNES, runes="a"),
            KeyMsg(type=KeyType.RUNES, runes="a", alt=True),
            KeyMsg(type=KeyType.RUNES, runes="a"),
        ],
    ),
    ("ctrl+a", b"\x01", [KeyMsg(type=KeyType.CTRL_A)]),
    (
        "ctrl+a ctrl+b",
        b"\x01\x02",
        [KeyMsg(type=KeyType.CTRL_A), KeyMsg(type=KeyType.CTRL_B)],
    ),
    ("alt+a", b"\x1ba", [KeyMsg(type=KeyType.RUNES, runes="a", alt=True)]),
    ("abcd", b"abcd", [KeyMsg(type=KeyType.RUNES, runes="abcd")]),
    ("up", b"\x1b[A", [KeyMsg(type=KeyType.UP)]),
    (
        "wheel up",
        bytes([0x1B, ord("["), ord("M"), 32 + 0b0100_0000, 65, 49]),
        [_m(32, 16, MouseEventType.WHEEL_UP, MouseButton.WHEEL_UP, MouseAction.PRESS)],
    ),
    (
        "left motion release",
        bytes(
            [
                0x1B, ord("["), ord("M"), 32 + 0b0010_0000, 32 + 33, 16 + 33,
                0x1B, ord("["), ord("M"), 32 + 0b0000_0011, 64 + 33, 32 + 33,
            ]
        ),
        [
            _m(32, 16, MouseEventType.LEFT, MouseButton.LEFT, MouseAction.MOTION),
            _m(64, 32, MouseEventType.RELEASE, MouseButton.NONE, MouseAction.RELEASE),
        ],
    ),
    ("shift+tab", b"\x1b[Z", [KeyMsg(type=KeyType.SHIFT_TAB)]),
    ("enter", b"\r", [KeyMsg(type=KeyType.ENTER)]),
    ("alt+enter", b"\x1b\r", [KeyMsg(type=KeyType.ENTER, alt=True)]),
    ("insert", b"\x1b[2~", [KeyMsg(type=KeyType.INSERT)]),
    ("alt+ctrl+a", b"\x1b\x01", [KeyMsg(type=KeyType.CTRL_A, alt=True)]),
    (
        "?CSI[45 45 45 45 88]?",
        b"\x1b[----X",
        [UnknownCSISequenceMsg(b"\x1b[----X")],
    ),
    ("up", b"\x1bOA", [KeyMsg(type=KeyType.UP)]),
    ("down", b"\x1bOB", [KeyMsg(type=KeyType.DOWN)]),
    ("right", b"\x1bOC", [KeyMsg(type=KeyType.RIGHT)]),
    ("left", b"\x1bOD", [KeyMsg(type=KeyType.LEFT)]),
    ("alt+enter", b"\x1b\x0d", [KeyMsg(type=KeyType.ENTER, alt=True)]),
    ("alt+backspace", b"\x1b\x7f", [KeyMsg(type=KeyType.BACKSPACE, alt=True)]),
    ("ctrl+@", b"\x00", [KeyMsg(type=KeyType.CTRL_AT)]),
    ("alt+ctrl+@", b"\x1b\x00", [KeyMsg(type=KeyType.CTRL_AT, alt=True)]),
    ("esc", b"\x1b", [KeyMsg(type=KeyType.ESC)]),
    ("alt+esc", b"\x1b\x1b", [KeyMsg(type=KeyType.ESC, alt=True)]),
    (
        "[a b] o",
        b"\x1b[200~a b\x1b[201~o",
        [
            KeyMsg(type=KeyType.RUNES, runes="a b", paste=True),
            KeyMsg(type=KeyType.RUNES, runes="o"),
        ],
    ),
    (
        "[a\x03\nb]",
        b"\x1b[200~a\x03\nb\x1b[201~",
        [KeyMsg(type=KeyType.RUNES, runes="a\x03\nb", paste=True)],
    ),
    ("?0xfe?", b"\xfe", [UnknownInputByteMsg(0xFE)]),
    (
        "a ?0xfe?   b",
        b"a\xfe b",
        [
            KeyMsg(type=KeyType.RUNES, runes="a"),
            UnknownInputByteMsg(0xFE),
            KeyMsg(type=KeyType.SPACE, runes=" "),
            KeyMsg(type=KeyType.RUNES, runes="b"),
        ],
    ),
]


@pytest.mark.parametrize(
    "title,data,expected",
    _READ_CASES,
    ids=[f"{n}: {case[0]!r}" for n, case in enumerate(_READ_CASES)],
)
def test_read_input(title, data, expected):
    msgs = list(read_ansi_inputs(io.BytesIO(data)))
    assert " ".join(str(m) for m in msgs) == title
    assert msgs == expected


def test_read_long_input():
    text = "a" * 1000
    msgs = list(read_ansi_inputs(io.BytesIO(text.encode())))
    assert len(msgs) == 1
    assert msgs[0] == KeyMsg(type=KeyType.RUNES, runes=text)
    assert msgs[0].alt is False


def test_read_paste_spanning_buffers():
    body = "x" * 300
    data = b"\x1b[200~" + body.encode() + b"\x1b[201~"
    msgs = list(read_ansi_inputs(io.BytesIO(data)))
    assert msgs == [KeyMsg(type=KeyType.RUNES, runes=body, paste=True)]
    assert str(msgs[0]) == f"[{body}]"


def test_read_inputs_matches_ansi_reader():
    data = b"ab\x1b[A\x01"
    assert list(read_inputs(io.BytesIO(data))) == [
        KeyMsg(type=KeyType.RUNES, runes="ab"),
        KeyMsg(type=KeyType.UP),
        KeyMsg(type=KeyType.CTRL_A),
    ]


def test_read_inputs_empty_stream_yields_nothing():
    assert list(read_inputs(io.BytesIO(b""))) == []