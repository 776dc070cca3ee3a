"""Coloured console logging."""

from __future__ import annotations

import sys

_RESET = "\033[0m"
_WHITE = "\033[37m"
_YELLOW = "\033[33m"
_RED = "\033[31m"


def _use_color() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _write(color: str, prefix: str, message: str, reset: bool) -> None:
    if _use_color():
        text = f"{color}{prefix} {message}"
        if reset:
            text += _RESET
    else:
        text = f"{prefix} {message}"
    print(text, flush=True)


def reset_logger_color() -> None:
    """Restore the default console colour."""
    if _use_color():
        sys.stdout.write(_RESET)
        sys.stdout.flush()


def log_info(message: str) -> None:
    _write(_WHITE, "[INFO]", message, reset=False)


def log_warning(message: str) -> None:
    _write(_YELLOW, "[WARNING]", message, reset=True)


def log_error(message: str) -> None:
    _write(_RED, "[ERROR]", message, reset=True)