"""
Debug — helpers for seeing errors that would otherwise stay in a future.

    from pledge.debug import rethrow

    then(future, on_rejected=rethrow)
"""

from __future__ import annotations

from pledge.debug._rethrow import rethrow, call_soon

__all__ = ("rethrow", "call_soon")
