# teacup

Building blocks for terminal user interfaces: decoding raw terminal input
into key, mouse and focus messages, messages that ask for terminal modes to
change, ANSI escape sequence helpers, logging to a file and running external
programs in the foreground.

## Installation

```
pip install teacup
```

## Reading input

`teacup.input.read_ansi_inputs` takes a binary stream and yields messages
as it decodes them, until the stream ends. `read_inputs` does the same.

```python
import io
from teacup.input import read_ansi_inputs

for msg in read_ansi_inputs(io.BytesIO(b"a\x1b[A\x1b[<0;33;17M")):
    print(msg)
# a
# up
# left press
```

What comes out:

- `teacup.keys.KeyMsg` for key presses. Its string form, such as `"enter"`,
  `"ctrl+c"`, `"alt+a"`, `"shift+tab"` or `"f5"`, is handy for comparing
  keys. `type` is a `KeyType`, `runes` holds the typed text, and `alt` is
  set when the key came with an escape prefix. Several printable characters
  that arrive together become one key.
- Pasted text, when the terminal brackets it, becomes a single `KeyMsg`
  with `paste=True`; its string form is wrapped in `[...]` so it never
  matches a key binding.
- `teacup.mouse.MouseMsg` for X10 and SGR mouse reports, with a
  `MouseButton`, a `MouseAction`, the `shift`/`alt`/`ctrl` flags and
  coordinates counted from zero.
- `teacup.messages.FocusMsg` and `BlurMsg` for focus reports.
- `teacup.keys.UnknownInputByteMsg` for bytes that are not valid UTF-8 and
  `UnknownCSISequenceMsg` for CSI sequences that are not recognised.

The lower-level pieces can be used on their own:
`teacup.input.detect_one_msg(data, can_have_more_data)` returns the width and
message of the first message in a byte string (width 0 meaning more bytes
are needed), `teacup.keys.detect_sequence`, `detect_bracketed_paste` and
`detect_report_focus` match single kinds of input, and
`teacup.mouse.parse_x10_mouse_event`, `parse_sgr_mouse_event` and
`parse_mouse_button` decode mouse reports. `teacup.keys.SEQUENCES` maps the
known escape sequences to keys.

## Terminal control messages

`teacup.messages` defines the messages a program loop can act on, such as
`WindowSizeMsg`, `ClearScreenMsg`, `EnterAltScreenMsg`,
`EnableMouseCellMotionMsg`, `HideCursorMsg` and `EnableBracketedPasteMsg`,
and command functions that return them: `clear_screen`, `enter_alt_screen`,
`exit_alt_screen`, `enable_mouse_cell_motion`, `enable_mouse_all_motion`,
`disable_mouse`, `hide_cursor`, `show_cursor`, `enable_bracketed_paste`,
`disable_bracketed_paste`, `enable_report_focus` and `disable_report_focus`.

## ANSI helpers

`teacup.ansi` holds escape sequence constants (`HIDE_CURSOR`,
`SET_ALT_SCREEN_SAVE_CURSOR_MODE`, `SET_BRACKETED_PASTE_MODE`,
`ERASE_LINE_RIGHT` and others) and functions that build sequences:
`cursor_up`, `cursor_backward`, `cursor_position`, `set_top_bottom_margins`,
`insert_line` and `set_window_title`. `string_width` counts the terminal
cells a string takes, ignoring escape sequences, and `truncate(s, length,
tail)` cuts a string to a width while keeping its escape sequences.

## Logging to a file

The terminal is busy while an interface runs, so log to a file instead:

```python
from teacup.logfile import default_logger, log_to_file

f = log_to_file("debug.log", "debug")
default_logger.println("some test log")   # writes "debug some test log"
f.close()
```

The file is created if missing and appended to. A space is added after a
prefix that does not already end in whitespace. `log_to_file_with` does the
same for any object with `set_output` and `set_prefix` methods.

## Running external programs

`teacup.execution.exec_process(args, callback)` returns a command which,
when called, gives an `ExecMsg` holding an `OsExecCommand` and the callback.
Whoever handles the message runs the command: `set_stdin`, `set_stdout` and
`set_stderr` fill in streams that are still unset, and `run()` raises
`subprocess.CalledProcessError` on a non-zero exit or `OSError` when the
program cannot be started. `exec_command` accepts any object that follows
the `ExecCommand` protocol.

## What is not included

teacup does not draw frames to the terminal and has no program loop: there
is no renderer, no model/update cycle and no set of program options. The
messages in `teacup.messages` and the `ExecMsg` from `teacup.execution`
describe what should happen; acting on them, and putting the terminal into
raw mode, is left to the code that uses this package.

## Running the tests

```
pip install teacup[test]
pytest
```