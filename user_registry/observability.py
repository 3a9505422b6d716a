"""Logging setup."""

import logging

_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger. Repeated calls only change the level."""
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")
        )
        root.addHandler(_handler)
    root.setLevel(level)
