"""
Collection types — predicate verdicts and filter slots.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

# ═══════════════════════════════════════════════════════════════════════════════
# Verdict — What a Predicate Returned
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Immediate:
    """Predicate answered synchronously."""

    keep: bool


@dataclass(frozen=True, slots=True)
class Deferred:
    """Predicate answered with something still pending."""

    verdict: asyncio.Future[Any]


type Verdict = Immediate | Deferred

# ═══════════════════════════════════════════════════════════════════════════════
# Slot — Item Between Filter Passes
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Kept[T]:
    """Item already selected. Carried through later passes untouched."""

    value: T


@dataclass(frozen=True, slots=True)
class PendingKept[T]:
    """
    Item whose predicate verdict is still pending.

    Holds the original item, not the predicate's result.
    """

    value: T
    verdict: asyncio.Future[Any]


@dataclass(frozen=True, slots=True)
class Decided[T]:
    """A PendingKept after its verdict settled."""

    value: T
    keep: bool


type Slot[T] = Kept[T] | PendingKept[T]

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Immediate",
    "Deferred",
    "Verdict",
    "Kept",
    "PendingKept",
    "Decided",
    "Slot",
)
