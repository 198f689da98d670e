"""Helpers for configuring and using project logging."""

from __future__ import annotations

from logging import DEBUG, INFO, WARNING, Formatter, StreamHandler, getLogger

get = getLogger
log = get(__name__)


def init(debug_level: int = 0) -> None:
    """Initializes simple logging defaults."""
    root_log = get()

    if root_log.handlers:
        return

    fmt = '%(levelname).1s %(asctime)s . %(message)s'
    formatter = Formatter(fmt)

    handler = StreamHandler()
    handler.setFormatter(formatter)

    root_log.addHandler(handler)
    root_log.setLevel(DEBUG if debug_level > 0 else WARNING)

    transform_log = get('jsonblob.transform')
    transform_log.setLevel(DEBUG if debug_level > 1 else INFO)
