"""Process-wide logging with levels, colourised stream output and syslog.

Messages go through :func:`log`, which translates and formats them, then
through :func:`log_helper`, which applies the level filter and the message
callback before passing the message to the active backend.
"""

from __future__ import annotations

import datetime
import sys
import threading
from collections.abc import Callable
from typing import IO

from . import locale as _i18n
from .log_levels import (
    LoggingBackend,
    LogLevel,
    log_level_to_severity,
    string_to_syslog_facility,
)

try:
    import syslog as _syslog
except ImportError:  # pragma: no cover - not available on every platform
    _syslog = None

CYAN = "\33[0;36m"
GREEN = "\33[0;32m"
YELLOW = "\33[0;33m"
RED = "\33[0;31m"
RESET = "\33[0m"

# Keyed by the printed label of each level.
_COLORS = {
    "TRACE": CYAN,
    "DEBUG": CYAN,
    "INFO": GREEN,
    "WARN": YELLOW,
    "ERROR": RED,
    "FATAL": RED,
}

_callback: Callable[[LogLevel, str], bool] | None = None
_level = LogLevel.none
_backend = LoggingBackend.file
_colorize = False
_error_logged = False
_sink: IO[str] | None = None
_write_lock = threading.Lock()


def setup_logging(
    dst: IO[str],
    locale: str = "",
    domain: str = _i18n.DEFAULT_DOMAIN,
    use_locale: bool = True,
) -> None:
    """Send log output to ``dst`` and reset the level to warning.

    Colourisation is switched on when ``dst`` is a terminal-attached
    standard stream.
    """
    global _sink, _colorize
    _sink = dst
    if use_locale:
        _i18n.get_locale(locale, domain)
    set_level(LogLevel.warning)
    _colorize = color_supported(dst)


def set_level(level: LogLevel) -> None:
    """Set the current log level; :attr:`LogLevel.none` disables logging."""
    global _level
    _level = LogLevel(level)


def get_level() -> LogLevel:
    """Return the current log level."""
    return _level


def set_colorization(color: bool) -> None:
    """Set whether stream output is colourised."""
    global _colorize
    _colorize = bool(color)


def get_colorization() -> bool:
    """Return whether stream output is colourised."""
    return _colorize


def is_enabled(level: LogLevel) -> bool:
    """Whether messages of ``level`` pass the current level."""
    return _level is not LogLevel.none and int(level) >= int(_level)


def error_has_been_logged() -> bool:
    """Whether an error or fatal message has been logged."""
    return _error_logged


def clear_error_logged_flag() -> None:
    """Reset the flag recording that an error has been logged."""
    global _error_logged
    _error_logged = False


def on_message(callback: Callable[[LogLevel, str], bool] | None) -> None:
    """Install a callback run before each message is logged.

    If the callback returns false the message is not logged. ``None``
    removes the callback.
    """
    global _callback
    _callback = callback


def log_helper(logger: str, level: LogLevel, line_num: int, message: str) -> None:
    """Log an already formatted message to ``logger``."""
    global _error_logged
    if level >= LogLevel.error:
        _error_logged = True
    if not is_enabled(level) or (_callback is not None and not _callback(level, message)):
        return
    if _backend is LoggingBackend.syslog:
        _log_syslog(level, message)
    elif _backend is LoggingBackend.eventlog:
        raise RuntimeError("eventlog is available only on windows")
    else:
        _log_stream(logger, level, line_num, message)


def log(logger: str, level: LogLevel, line_num: int, fmt: str, *args: object) -> None:
    """Translate ``fmt``, substitute ``args`` and log the result.

    A ``line_num`` greater than zero is shown after the logger name.
    """
    if args:
        message = _i18n.format(fmt, *args)
    else:
        message = _i18n.translate(fmt)
    log_helper(logger, level, line_num, message)


def colorize(dst: IO[str], level: LogLevel = LogLevel.none) -> None:
    """Write the colour code for ``level`` to ``dst``; ``none`` resets it."""
    if not _colorize:
        return
    dst.write(_COLORS.get(str(LogLevel(level)), RESET))


def color_supported(dst: IO[str]) -> bool:
    """Whether ``dst`` is standard output or error attached to a terminal."""
    for stream in (sys.stdout, sys.stderr):
        if dst is stream and stream is not None:
            try:
                return stream.isatty()
            except (AttributeError, ValueError):
                return False
    return False


def setup_syslog_logging(application: str, facility: str) -> None:
    """Send log output to syslog under ``application`` and ``facility``.

    The level is reset to warning. Raises :class:`ValueError` for an
    unknown facility.
    """
    code = string_to_syslog_facility(facility)
    if _syslog is None:
        raise RuntimeError("syslog is only available on POSIX platforms")
    _syslog.openlog(application, _syslog.LOG_PID | _syslog.LOG_NDELAY, int(code))
    set_level(LogLevel.warning)
    enable_syslog()


def clean_syslog_logging() -> None:
    """Close the connection to syslog."""
    if _syslog is not None:
        _syslog.closelog()


def enable_syslog() -> None:
    """Route log messages to syslog."""
    global _backend
    _backend = LoggingBackend.syslog


def disable_syslog() -> None:
    """Route log messages back to the stream."""
    global _backend
    _backend = LoggingBackend.file


def _log_syslog(level: LogLevel, message: str) -> None:
    if level is LogLevel.none:
        return
    if _syslog is None:
        raise RuntimeError("syslog is only available on POSIX platforms")
    _syslog.syslog(log_level_to_severity(level), message)


def _log_stream(logger: str, level: LogLevel, line_num: int, message: str) -> None:
    dst = _sink if _sink is not None else sys.stderr
    if not is_enabled(level):
        return
    now = datetime.datetime.now()
    header = f"{now.date().isoformat()} {now.strftime('%H:%M:%S.%f')} {level:<5} {logger}"
    if line_num > 0:
        header += f":{line_num}"
    with _write_lock:
        dst.write(header + " - ")
        colorize(dst, level)
        dst.write(message)
        colorize(dst)
        dst.write("\n")
        dst.flush()