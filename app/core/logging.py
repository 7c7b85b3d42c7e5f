"""
Logging configuration for the application.

``setup_logging`` attaches a single console handler to the root logger.
It is safe to call repeatedly (for example from tests that build several
applications); handlers are only added the first time.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once."""
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    if root.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root.addHandler(handler)
