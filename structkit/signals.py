"""Signal handler registration."""

from __future__ import annotations

import signal
from typing import Any, Callable

__all__ = ["register"]

Handler = Callable[[int, Any], Any] | int | signal.Handlers | None


def register(signum: int, handler: Handler) -> Handler:
    """Install ``handler`` for ``signum`` and return the handler it replaced."""
    return signal.signal(signum, handler)