"""Logging setup for the codexsync command line."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "codexsync"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Send log records to stderr, one line per discrepancy or suggestion.

    ``level`` applies to the codexsync loggers only; third-party libraries stay
    at WARNING so a debug run is not drowned in their output. Pass
    ``force=True`` to replace handlers installed earlier (tests, notebooks).
    """

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
