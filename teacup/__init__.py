"""Terminal user interface building blocks: input decoding, terminal control messages, ANSI helpers, file logging and foreground process execution."""

__version__ = "0.1.0"