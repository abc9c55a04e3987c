"""
Core types for pledge.

Re-exports from kungfu + custom type aliases.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Entries
# ═══════════════════════════════════════════════════════════════════════════════

type Entry[T] = T | Awaitable[T]
"""A plain value or anything that eventually settles to one."""

type Label = str | None
"""Diagnostic tag threaded through combinators. Logged, never acted on."""

# ═══════════════════════════════════════════════════════════════════════════════
# Scheduling
# ═══════════════════════════════════════════════════════════════════════════════

type Scheduler = Callable[[Callable[[], object]], object]
"""Runs a callback on a later turn of the loop (e.g. loop.call_soon)."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Type aliases
    "Entry",
    "Label",
    "Scheduler",
)
