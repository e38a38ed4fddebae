"""Logging setup for the gallery server."""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s | %(levelname)s %(name)s - %(message)s"


class LoggingSetup:
    """Static helpers for configuring the package logger."""

    @staticmethod
    def configure(level: str | int = logging.INFO) -> logging.Logger:
        """Attach a stream handler to the ``invite_gallery`` logger.

        Safe to call multiple times: an existing handler is left in place and
        only the level is updated.
        """
        logger = logging.getLogger("invite_gallery")
        logger.setLevel(level)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"),
            )
            logger.addHandler(handler)
        return logger
