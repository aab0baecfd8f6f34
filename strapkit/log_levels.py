"""Logging levels, backends and syslog facilities, with their conversions."""

from __future__ import annotations

import enum

from . import locale

SEVERITY_ALERT = 1
"""Syslog priority for messages that need immediate action."""

SEVERITY_ERR = 3
"""Syslog priority for error conditions."""

SEVERITY_WARNING = 4
"""Syslog priority for warning conditions."""

SEVERITY_INFO = 6
"""Syslog priority for informational messages."""

SEVERITY_DEBUG = 7
"""Syslog priority for debug messages."""


class LogLevel(enum.IntEnum):
    """The supported logging levels, from least to most severe."""

    none = 0
    trace = 1
    debug = 2
    info = 3
    warning = 4
    error = 5
    fatal = 6

    @property
    def label(self) -> str:
        """The printed name of the level; empty for :attr:`none`."""
        return _LABELS.get(self, "")

    def __str__(self) -> str:
        return self.label

    def __format__(self, spec: str) -> str:
        return format(self.label, spec)


_LABELS = {
    LogLevel.trace: "TRACE",
    LogLevel.debug: "DEBUG",
    LogLevel.info: "INFO",
    LogLevel.warning: "WARN",
    LogLevel.error: "ERROR",
    LogLevel.fatal: "FATAL",
}

_NAMES = {
    "none": LogLevel.none,
    "trace": LogLevel.trace,
    "debug": LogLevel.debug,
    "info": LogLevel.info,
    "warn": LogLevel.warning,
    "error": LogLevel.error,
    "fatal": LogLevel.fatal,
}


class LoggingBackend(enum.Enum):
    """Where log messages are sent."""

    eventlog = "eventlog"
    syslog = "syslog"
    file = "file"


class SyslogFacility(enum.IntEnum):
    """The supported syslog facilities, with their syslog codes."""

    kern = 0 << 3
    user = 1 << 3
    mail = 2 << 3
    daemon = 3 << 3
    auth = 4 << 3
    syslog = 5 << 3
    lpr = 6 << 3
    news = 7 << 3
    uucp = 8 << 3
    cron = 9 << 3
    local0 = 16 << 3
    local1 = 17 << 3
    local2 = 18 << 3
    local3 = 19 << 3
    local4 = 20 << 3
    local5 = 21 << 3
    local6 = 22 << 3
    local7 = 23 << 3


def parse_log_level(text: str) -> LogLevel:
    """Read a log level name, ignoring case and surrounding whitespace.

    Accepts none, trace, debug, info, warn, error and fatal; raises
    :class:`ValueError` for anything else.
    """
    tokens = text.split()
    value = tokens[0].lower() if tokens else ""
    level = _NAMES.get(value)
    if level is None:
        raise ValueError(
            locale.format(
                "invalid log level '{1}': expected none, trace, debug, info, "
                "warn, error, or fatal.",
                value,
            )
        )
    return level


def string_to_syslog_facility(facility: str) -> SyslogFacility:
    """Return the syslog facility named ``facility``.

    Raises :class:`ValueError` if the name is not a known facility.
    """
    try:
        return SyslogFacility[facility]
    except KeyError:
        raise ValueError(
            locale.format("invalid syslog facility: '{1}'", facility)
        ) from None


def log_level_to_severity(level: LogLevel) -> int:
    """Return the syslog priority used for messages of ``level``."""
    if level is LogLevel.fatal:
        return SEVERITY_ALERT
    if level is LogLevel.error:
        return SEVERITY_ERR
    if level is LogLevel.warning:
        return SEVERITY_WARNING
    if level is LogLevel.info:
        return SEVERITY_INFO
    if level in (LogLevel.debug, LogLevel.trace):
        return SEVERITY_DEBUG
    return SEVERITY_INFO