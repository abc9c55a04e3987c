"""
filter_() — select settled entries with a sync or async predicate.

The first pass judges every joined value. Values whose predicate returned
an awaitable become PendingKept slots; if any exist, the whole slot
sequence is joined again and rescanned. The rescan only sees slots and
never calls the predicate, so at most two passes run and the predicate
sees every original item exactly once.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from typing import Any

from pledge._future import all_, is_future, then
from pledge._types import Entry, Label
from pledge.collection._types import (
    Decided,
    Deferred,
    Immediate,
    Kept,
    PendingKept,
    Slot,
    Verdict,
)
from pledge.collection._validate import require_callable, require_sequence

logger = logging.getLogger(__name__)

type Predicate[T] = Callable[[T], Any]
"""Returns a truthy/falsy value, or an awaitable of one."""

# ═══════════════════════════════════════════════════════════════════════════════
# judge() — Classify Predicate Outcome
# ═══════════════════════════════════════════════════════════════════════════════


def judge[T](predicate: Predicate[T], item: T) -> Verdict:
    outcome = predicate(item)
    if is_future(outcome):
        return Deferred(asyncio.ensure_future(outcome))
    return Immediate(bool(outcome))


# ═══════════════════════════════════════════════════════════════════════════════
# Passes
# ═══════════════════════════════════════════════════════════════════════════════


def _decide[T](slot: PendingKept[T]) -> asyncio.Future[Decided[T]]:
    return then(slot.verdict, lambda outcome: Decided(slot.value, bool(outcome)))


def _unfold[T](slot: Slot[T]) -> Kept[T] | asyncio.Future[Decided[T]]:
    match slot:
        case PendingKept():
            return _decide(slot)
        case Kept():
            return slot


def _observe(verdict: asyncio.Future[Any]) -> None:
    if not verdict.cancelled():
        verdict.exception()


def _judge_all[T](
    settled: list[T],
    predicate: Predicate[T],
    label: Label,
) -> list[T] | asyncio.Future[list[T]]:
    slots: list[Slot[T]] = []
    pending = False

    try:
        for item in settled:
            match judge(predicate, item):
                case Deferred(verdict=verdict):
                    pending = True
                    slots.append(PendingKept(item, verdict))
                case Immediate(keep=True):
                    slots.append(Kept(item))
                case Immediate():
                    pass
    except BaseException:
        # verdicts already started still settle; nobody awaits them now
        for slot in slots:
            if isinstance(slot, PendingKept):
                slot.verdict.add_done_callback(_observe)
        raise

    if not pending:
        return [slot.value for slot in slots]

    logger.debug("filter_ pass pending (label=%s)", label)
    rejoined = all_([_unfold(slot) for slot in slots], label)
    return then(rejoined, _rescan, label=label)


def _rescan[T](settled: list[Kept[T] | Decided[T]]) -> list[T]:
    kept: list[T] = []
    for slot in settled:
        match slot:
            case Decided(value=value, keep=keep):
                if keep:
                    kept.append(value)
            case Kept(value=value):
                kept.append(value)
    return kept


# ═══════════════════════════════════════════════════════════════════════════════
# filter_()
# ═══════════════════════════════════════════════════════════════════════════════


def filter_[T](
    entries: Sequence[Entry[T]],
    predicate: Predicate[T],
    label: Label = None,
) -> asyncio.Future[list[T]]:
    """
    Wait for every entry, then keep the values the predicate accepts.

    The predicate may answer with a plain truthy/falsy value or with an
    awaitable of one. Relative order of kept values follows the input.
    Raises InvalidArgument immediately for a non-sequence or a
    non-callable; any other failure (a rejected entry, a predicate that
    raises, a predicate awaitable that rejects) rejects the returned
    future with the original reason.

    Example:
        from pledge import collection as C

        async def can_post(user: User) -> bool:
            privileges = await fetch_privileges(user)
            return privileges.can_create_blog_post

        writers = await C.filter_(users, can_post)
    """
    require_sequence("filter_", entries)
    require_callable("filter_", predicate)

    return then(
        all_(entries, label),
        lambda settled: _judge_all(settled, predicate, label),
        label=label,
    )


__all__ = ("filter_", "judge", "Predicate")
