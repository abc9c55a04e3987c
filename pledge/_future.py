"""
Future adapters — the continuation contract over asyncio.

asyncio.Future is the single-valued primitive and asyncio.gather is the
join. This module only adds what the combinators need on top of them:
structural detection, settled constructors, `then`-style chaining and a
join that accepts plain values next to awaitables.

    from pledge import then, all_, resolve

    joined = all_([resolve(1), 2, fetch_three()])
    doubled = then(joined, lambda values: [v * 2 for v in values])
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from functools import partial
from typing import Any, TypeGuard

from pledge._types import Entry, Label

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Detection & Construction
# ═══════════════════════════════════════════════════════════════════════════════


def is_future(obj: object) -> TypeGuard[Awaitable[Any]]:
    """True for anything that can be awaited (futures, tasks, coroutines)."""
    return inspect.isawaitable(obj)


def resolve[T](value: Entry[T]) -> asyncio.Future[T]:
    """
    Lift an entry into a future on the running loop.

    Plain values become already-fulfilled futures; awaitables are coerced
    with asyncio.ensure_future.
    """
    loop = asyncio.get_running_loop()
    if is_future(value):
        return asyncio.ensure_future(value, loop=loop)
    future: asyncio.Future[T] = loop.create_future()
    future.set_result(value)
    return future


def reject(reason: BaseException) -> asyncio.Future[Any]:
    """Already-rejected future on the running loop."""
    future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
    future.set_exception(reason)
    return future


# ═══════════════════════════════════════════════════════════════════════════════
# then() — Attach Continuation
# ═══════════════════════════════════════════════════════════════════════════════


def then[T, U](
    future: Awaitable[T],
    on_fulfilled: Callable[[T], Entry[U]] | None = None,
    on_rejected: Callable[[BaseException], Entry[U]] | None = None,
    label: Label = None,
) -> asyncio.Future[U]:
    """
    Chain a continuation onto a future.

    The returned future settles with the handler's return value (awaitable
    results are adopted) or with the exception the handler raised. A
    missing handler passes the value or reason through unchanged.

    Example:
        checked = then(fetch(), on_fulfilled=validate, on_rejected=rethrow)
    """
    source = asyncio.ensure_future(future)
    chained: asyncio.Future[U] = source.get_loop().create_future()

    def settle(done: asyncio.Future[T]) -> None:
        if done.cancelled():
            if not chained.done():
                chained.cancel()
            return

        reason = done.exception()
        if chained.done():
            return

        try:
            if reason is None:
                value = done.result()
                outcome = on_fulfilled(value) if on_fulfilled is not None else value
            elif on_rejected is not None:
                outcome = on_rejected(reason)
            else:
                chained.set_exception(reason)
                return
        except Exception as exc:
            logger.debug("then handler raised %r (label=%s)", exc, label)
            chained.set_exception(exc)
            return

        _adopt(chained, outcome)

    source.add_done_callback(settle)
    return chained


def _adopt[U](target: asyncio.Future[U], outcome: Entry[U]) -> None:
    if not is_future(outcome):
        target.set_result(outcome)
        return
    inner = asyncio.ensure_future(outcome, loop=target.get_loop())
    inner.add_done_callback(partial(_transfer, target))


def _transfer[U](target: asyncio.Future[U], source: asyncio.Future[U]) -> None:
    if source.cancelled():
        if not target.done():
            target.cancel()
        return
    reason = source.exception()
    if target.done():
        return
    if reason is not None:
        target.set_exception(reason)
    else:
        target.set_result(source.result())


# ═══════════════════════════════════════════════════════════════════════════════
# all_() — Join Primitive
# ═══════════════════════════════════════════════════════════════════════════════


def all_[T](entries: Sequence[Entry[T]], label: Label = None) -> asyncio.Future[list[T]]:
    """
    Join a sequence of values and awaitables into one future of a list.

    Fulfils with the settled values in input order once every entry has
    fulfilled. Rejects with the first reason observed; later failures are
    retrieved and ignored (asyncio.gather semantics).

    Example:
        values = await all_([resolve(1), 2, fetch_three()])  # [1, 2, 3]
    """
    futures = [resolve(entry) for entry in entries]
    logger.debug("all_ joining %d entries (label=%s)", len(futures), label)
    return asyncio.gather(*futures)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("is_future", "resolve", "reject", "then", "all_")
