"""Callback notification shared by the record formatters."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

logger = logging.getLogger(__name__)


def notify(callbacks: Sequence[Any], event: str, *args: Any) -> int:
    """Call ``event`` on every callback that defines it.

    A failing callback is logged at WARNING level and skipped, so observers
    can never break a render pass.

    Parameters:
        callbacks: Callback objects to notify, in registration order.
        event: Name of the method to call (``"on_render_start"`` ...).
        *args: Positional arguments forwarded to the method.

    Returns:
        The number of callbacks that raised.
    """
    failures = 0
    for callback in callbacks:
        handler = getattr(callback, event, None)
        if not callable(handler):
            continue
        try:
            handler(*args)
        except Exception:
            failures += 1
            logger.warning("Callback %r.%s failed", callback, event, exc_info=True)
    return failures
