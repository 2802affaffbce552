import logging
import logging.handlers
from typing import List, Optional

_LOGGER_NAME = "mandelview"

def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)

def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s.%(msecs)03dZ %(levelname)s %(name)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

def _build_handlers(
    *, console: bool, log_file: Optional[str], rotate_bytes: int, rotate_count: int
) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler())
    if log_file:
        handlers.append(logging.handlers.RotatingFileHandler(
            log_file, maxBytes=rotate_bytes, backupCount=rotate_count, encoding="utf-8"
        ))
    return handlers

def close_logging() -> None:
    """Detach and close every handler on the package logger."""
    logger = get_logger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

def configure_root_logging(
    *,
    level: int = logging.INFO,
    console: bool = True,
    log_file: Optional[str] = "mandelview.log",
    rotate_bytes: int = 5 * 1024 * 1024,
    rotate_count: int = 5,
) -> logging.Logger:
    """Route the package logger to the console and/or a rotating file.

    Calling it again replaces the previous handlers, so each CLI run owns its log file.
    """
    close_logging()
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False
    fmt = _build_formatter()
    for handler in _build_handlers(
        console=console, log_file=log_file, rotate_bytes=rotate_bytes, rotate_count=rotate_count
    ):
        handler.setLevel(level)
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    return logger
