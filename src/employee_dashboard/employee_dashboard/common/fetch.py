from __future__ import annotations

from typing import Callable, TypeVar

from ..core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def fetch_or_default(load: Callable[[], T], default: T, *, what: str) -> T:
    """Run a read for a page; on failure log it and render with ``default``."""
    try:
        return load()
    except Exception:
        logger.exception("Error fetching %s", what)
        return default
