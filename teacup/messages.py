"""Messages that control the terminal, and the commands that produce them."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "FocusMsg",
    "BlurMsg",
    "WindowSizeMsg",
    "RepaintMsg",
    "ClearScreenMsg",
    "EnterAltScreenMsg",
    "ExitAltScreenMsg",
    "EnableMouseCellMotionMsg",
    "EnableMouseAllMotionMsg",
    "DisableMouseMsg",
    "HideCursorMsg",
    "ShowCursorMsg",
    "EnableBracketedPasteMsg",
    "DisableBracketedPasteMsg",
    "EnableReportFocusMsg",
    "DisableReportFocusMsg",
    "clear_screen",
    "enter_alt_screen",
    "exit_alt_screen",
    "enable_mouse_cell_motion",
    "enable_mouse_all_motion",
    "disable_mouse",
    "hide_cursor",
    "show_cursor",
    "enable_bracketed_paste",
    "disable_bracketed_paste",
    "enable_report_focus",
    "disable_report_focus",
]


@dataclass(frozen=True)
class FocusMsg:
    """The terminal gained focus."""


@dataclass(frozen=True)
class BlurMsg:
    """The terminal lost focus."""


@dataclass(frozen=True)
class WindowSizeMsg:
    """The size of the terminal, sent at start-up and on every resize."""

    width: int
    height: int


@dataclass(frozen=True)
class RepaintMsg:
    """Forces a full repaint."""


@dataclass(frozen=True)
class ClearScreenMsg:
    """Clear the screen before the next update."""


@dataclass(frozen=True)
class EnterAltScreenMsg:
    """Enter the alternate screen buffer."""


@dataclass(frozen=True)
class ExitAltScreenMsg:
    """Leave the alternate screen buffer."""


@dataclass(frozen=True)
class EnableMouseCellMotionMsg:
    """Start listening for cell-motion mouse events."""


@dataclass(frozen=True)
class EnableMouseAllMotionMsg:
    """Start listening for all-motion mouse events."""


@dataclass(frozen=True)
class DisableMouseMsg:
    """Stop listening for mouse events."""


@dataclass(frozen=True)
class HideCursorMsg:
    """Hide the cursor."""


@dataclass(frozen=True)
class ShowCursorMsg:
    """Show the cursor."""


@dataclass(frozen=True)
class EnableBracketedPasteMsg:
    """Accept bracketed paste input."""


@dataclass(frozen=True)
class DisableBracketedPasteMsg:
    """Stop accepting bracketed paste input."""


@dataclass(frozen=True)
class EnableReportFocusMsg:
    """Report focus events to the program."""


@dataclass(frozen=True)
class DisableReportFocusMsg:
    """Stop reporting focus events to the program."""


def clear_screen() -> ClearScreenMsg:
    """Command: clear the screen and move the cursor to the top left."""
    return ClearScreenMsg()


def enter_alt_screen() -> EnterAltScreenMsg:
    """Command: enter the alternate screen buffer."""
    return EnterAltScreenMsg()


def exit_alt_screen() -> ExitAltScreenMsg:
    """Command: exit the alternate screen buffer."""
    return ExitAltScreenMsg()


def enable_mouse_cell_motion() -> EnableMouseCellMotionMsg:
    """Command: enable click, release, wheel and drag events."""
    return EnableMouseCellMotionMsg()


def enable_mouse_all_motion() -> EnableMouseAllMotionMsg:
    """Command: enable click, release, wheel and all motion events."""
    return EnableMouseAllMotionMsg()


def disable_mouse() -> DisableMouseMsg:
    """Command: stop listening for mouse events."""
    return DisableMouseMsg()


def hide_cursor() -> HideCursorMsg:
    """Command: hide the cursor."""
    return HideCursorMsg()


def show_cursor() -> ShowCursorMsg:
    """Command: show the cursor."""
    return ShowCursorMsg()


def enable_bracketed_paste() -> EnableBracketedPasteMsg:
    """Command: accept bracketed paste input."""
    return EnableBracketedPasteMsg()


def disable_bracketed_paste() -> DisableBracketedPasteMsg:
    """Command: stop processing bracketed paste input."""
    return DisableBracketedPasteMsg()


def enable_report_focus() -> EnableReportFocusMsg:
    """Command: report focus events to the program."""
    return EnableReportFocusMsg()


def disable_report_focus() -> DisableReportFocusMsg:
    """Command: stop reporting focus events to the program."""
    return DisableReportFocusMsg()