"""Logging configuration for dragboard."""

import logging
from datetime import UTC, datetime
from pathlib import Path

from textual.logging import TextualHandler


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Configure logging based on verbosity level and optional file output.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG), shown in the
            Textual console (`textual console`) while the board runs
        log_file: Optional path to write logs to file
    """
    if verbose == 0 and log_file is None:
        return

    level = logging.DEBUG if verbose >= 2 else logging.INFO

    logger = logging.getLogger("dragboard")
    logger.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Drop handlers from an earlier call so records are not emitted twice
    for handler in list(logger.handlers):
        if getattr(handler, "_dragboard", False):
            logger.removeHandler(handler)
            handler.close()

    # Routed through Textual so records never draw over the running board
    if verbose > 0:
        console_handler = TextualHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        _add_handler(logger, console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        _add_handler(logger, file_handler)

    timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info("=" * 60)
    logger.info("dragboard starting | %s | level=%s", timestamp, logging.getLevelName(level))
    logger.info("=" * 60)


def _add_handler(logger: logging.Logger, handler: logging.Handler) -> None:
    """Attach a handler, marking it as owned by setup_logging."""
    handler._dragboard = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
