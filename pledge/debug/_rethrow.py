"""
rethrow() — surface a rejection reason outside the future chain.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Never

from pledge._types import Scheduler

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Ambient Scheduler
# ═══════════════════════════════════════════════════════════════════════════════


def call_soon(callback: Callable[[], object]) -> object:
    """
    Default scheduler: next iteration of the running event loop.

    Exceptions raised by the callback go to the loop's exception handler.
    Outside a running loop there is no next iteration, so the callback
    runs now and its exception is logged instead.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        try:
            return callback()
        except Exception:
            logger.exception("Unhandled rejection (no running event loop)")
            return None
    return loop.call_soon(callback)


# ═══════════════════════════════════════════════════════════════════════════════
# rethrow()
# ═══════════════════════════════════════════════════════════════════════════════


def _raise(reason: BaseException) -> Never:
    raise reason


def rethrow(reason: BaseException, schedule: Scheduler | None = None) -> Never:
    """
    Raise `reason` twice: once later, outside any future, and once now.

    The scheduled raise reaches the event loop's exception handler, so the
    error shows up in logs even when nobody handles the rejection. The
    immediate raise keeps it flowing to the next rejection handler.

    Example:
        from pledge import then
        from pledge.debug import rethrow

        checked = then(risky(), on_rejected=rethrow)
        # the loop reports the error, and `checked` still rejects with it
    """
    (schedule or call_soon)(lambda: _raise(reason))
    raise reason


__all__ = ("rethrow", "call_soon")
