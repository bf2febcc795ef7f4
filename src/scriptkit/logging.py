"""Leveled logging to stderr and syslog.

Console output goes through a Rich handler on stderr so it never mixes with
values a shell script captures from stdout. Syslog records are formatted the
way `logger -t TAG -i` writes them: ``TAG[PID]: LEVEL message``.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import SysLogHandler

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "scriptkit"

# Local syslog sockets, first existing one wins (Linux, macOS).
SYSLOG_SOCKETS = ("/dev/log", "/var/run/syslog")

_ALIASES = {
    "warn": logging.WARNING,
    "err": logging.ERROR,
    "crit": logging.CRITICAL,
    "notice": logging.INFO,
}

logger = logging.getLogger(LOGGER_NAME)


def parse_level(name: str | int) -> int:
    """Convert a level name (or number) into a numeric logging level.

    Accepts the standard names case-insensitively plus the syslog-style
    aliases ``warn``, ``err``, ``crit`` and ``notice``.

    Raises:
        ValueError: If the name is not a known level.
    """
    if isinstance(name, int):
        return name
    key = name.strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    level = logging.getLevelName(key.upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {name}")
    return level


def config_console_handler(
    level: int = logging.INFO, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output.
        color: Enable color output when True.

    Returns:
        RichHandler: Handler suitable to attach to the scriptkit logger.
    """
    console = Console(color_system="auto" if color else None, stderr=True)
    handler = RichHandler(
        level=level,
        console=console,
        show_time=False,
        show_path=level <= logging.DEBUG,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _default_syslog_address() -> str | None:
    for candidate in SYSLOG_SOCKETS:
        if os.path.exists(candidate):
            return candidate
    return None


def config_syslog_handler(
    tag: str,
    address: str | tuple[str, int] | None = None,
    facility: int = SysLogHandler.LOG_USER,
) -> SysLogHandler | None:
    """Configure and return a SysLogHandler, or None if syslog is unreachable.

    Args:
        tag: Program tag prepended to every record.
        address: Socket path or (host, port); defaults to the local socket.
        facility: Syslog facility.
    """
    if address is None:
        address = _default_syslog_address()
        if address is None:
            logger.debug("No local syslog socket found in %s", SYSLOG_SOCKETS)
            return None

    try:
        handler = SysLogHandler(address=address, facility=facility)
    except OSError as exc:
        logger.debug("Syslog unavailable at %s: %s", address, exc)
        return None

    handler.setFormatter(
        logging.Formatter(f"{tag}[%(process)d]: %(levelname)s %(message)s")
    )
    return handler


def configure_logging(
    tag: str = LOGGER_NAME,
    level: str | int = "info",
    *,
    syslog: bool = True,
    console: bool = True,
    color: bool = True,
) -> logging.Logger:
    """(Re)configure the scriptkit logger and return it.

    Previously installed handlers are closed and replaced, so calling this
    more than once does not duplicate output.
    """
    numeric = parse_level(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(numeric)
    logger.propagate = False

    if console:
        logger.addHandler(config_console_handler(numeric, color=color))
    if syslog:
        handler = config_syslog_handler(tag)
        if handler is not None:
            handler.setLevel(numeric)
            logger.addHandler(handler)

    logger.debug(
        "Logging configured: tag=%s, level=%s, handlers=%s",
        tag,
        logging.getLevelName(numeric),
        [type(h).__name__ for h in logger.handlers],
    )
    return logger


def log(level: str | int, message: str, *args) -> None:
    """Log `message` at `level` through the scriptkit logger."""
    logger.log(parse_level(level), message, *args)
