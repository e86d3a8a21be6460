"""Logging setup for command-line use.

The library itself only creates module loggers under the ``bitdotio``
namespace; applications decide where records go. ``configure_logging`` is a
convenience for scripts and the CLI.
"""

import logging
import sys

LOG_FORMAT = "bitdotio %(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the ``bitdotio`` logger and set its level."""
    logger = logging.getLogger("bitdotio")
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    if not any(getattr(h, "_bitdotio", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._bitdotio = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
