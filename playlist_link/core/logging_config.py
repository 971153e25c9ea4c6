"""Structured logging configuration for the playlist link service."""

import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

ROOT_LOGGER_NAME = "playlist_link"


def setup_logging(
    level: str = "INFO",
    log_file: Path | str | None = None,
    rich_tracebacks: bool = True,
) -> logging.Logger:
    """
    Configure structured logging for the application.

    Every module logs through ``logging.getLogger(__name__)``, so configuring
    the package logger here covers the whole tree.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        rich_tracebacks: Enable rich traceback formatting

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    logger.handlers.clear()

    rich_handler = RichHandler(
        console=console,
        rich_tracebacks=rich_tracebacks,
        tracebacks_show_locals=(level.upper() == "DEBUG"),
        markup=False,
    )
    rich_handler.setLevel(getattr(logging, level.upper()))
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(rich_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    # Prevent logging to root logger
    logger.propagate = False

    logger.debug("Logging initialized (level=%s)", level)

    return logger


def log_resolution_event(
    logger_instance: logging.Logger,
    identifier: str,
    strategy: str,
    event: str,
    channel_id: str | None = None,
    candidates: int | None = None,
    error: str | None = None,
) -> None:
    """
    Log one step of the channel resolution cascade.

    Args:
        logger_instance: Logger to use
        identifier: Raw identifier supplied by the caller
        strategy: Strategy name (channel_id, channel_url, handle, search, details)
        event: Event type (resolved, skipped, failed, ambiguous, not_found)
        channel_id: Resolved channel ID, if any
        candidates: Number of search candidates, if any
        error: Error message if failed
    """
    extra: dict[str, Any] = {
        "identifier": identifier,
        "strategy": strategy,
        "event": event,
    }

    if channel_id:
        extra["channel_id"] = channel_id
    if candidates is not None:
        extra["candidates"] = candidates
    if error:
        extra["error"] = error

    if event == "failed":
        logger_instance.warning(
            "Channel resolution via %s failed for %r: %s", strategy, identifier, error, extra=extra
        )
    elif event == "resolved":
        logger_instance.info(
            "Resolved %r via %s to %s", identifier, strategy, channel_id, extra=extra
        )
    elif event == "ambiguous":
        logger_instance.info(
            "Search for %r returned %d candidates", identifier, candidates, extra=extra
        )
    else:
        logger_instance.debug(
            "Channel resolution via %s %s for %r", strategy, event, identifier, extra=extra
        )
