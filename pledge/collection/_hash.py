"""
hash_() — join over a keyed mapping.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from pledge._future import is_future
from pledge._types import Entry, Label

logger = logging.getLogger(__name__)


def hash_[T](
    entries: Mapping[str, Entry[T]],
    label: Label = None,
) -> asyncio.Future[dict[str, T]]:
    """
    Wait for every value of a mapping, keeping key association.

    Fulfils with a new dict holding exactly the input's keys once every
    awaitable value has fulfilled; plain values are recorded as-is. Rejects
    with the first reason any entry produces. Key order of the result is
    not significant.

    Example:
        from pledge import collection as C

        profile = await C.hash_({
            "user": fetch_user(uid),
            "orders": fetch_orders(uid),
            "region": "eu",
        })
    """
    loop = asyncio.get_running_loop()
    settled: asyncio.Future[dict[str, T]] = loop.create_future()
    results: dict[str, T] = {}
    keys = list(entries.keys())
    remaining = len(keys)

    if remaining == 0:
        settled.set_result({})
        return settled

    def record(key: str, value: T) -> None:
        nonlocal remaining
        results[key] = value
        remaining -= 1
        if remaining == 0:
            logger.debug("hash_ settled %d keys (label=%s)", len(results), label)
            settled.set_result(results)

    def on_done(key: str, done: asyncio.Future[Any]) -> None:
        if done.cancelled():
            if not settled.done():
                settled.cancel()
            return
        reason = done.exception()
        if settled.done():
            return
        if reason is not None:
            logger.debug("hash_ key %r rejected (label=%s)", key, label)
            settled.set_exception(reason)
            return
        record(key, done.result())

    for key in keys:
        entry = entries[key]
        if is_future(entry):
            future = asyncio.ensure_future(entry, loop=loop)
            future.add_done_callback(lambda done, key=key: on_done(key, done))
        else:
            record(key, entry)

    return settled


__all__ = ("hash_",)
