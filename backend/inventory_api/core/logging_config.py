"""
Process-wide logging setup.

Modules keep using ``logging.getLogger(__name__)``; this only installs the
root handler and format once, whatever the number of apps created.
"""
import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger. Later calls only adjust the level."""
    global _initialized
    root = logging.getLogger()
    root.setLevel(level.upper())
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root.addHandler(handler)
    _initialized = True
