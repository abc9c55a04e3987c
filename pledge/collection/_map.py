"""
map_() — transform every settled entry.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence

from pledge._future import all_, then
from pledge._types import Entry, Label
from pledge.collection._validate import require_callable, require_sequence

logger = logging.getLogger(__name__)


def map_[T, U](
    entries: Sequence[Entry[T]],
    fn: Callable[[T], U],
    label: Label = None,
) -> asyncio.Future[list[U]]:
    """
    Wait for every entry, then apply `fn` to each value in order.

    Raises InvalidArgument immediately for a non-sequence or a
    non-callable. Everything else, including an exception raised by `fn`,
    arrives through the returned future. The first entry to fail decides
    the rejection reason.

    Example:
        from pledge import collection as C

        result = await C.map_([resolve(1), 2, fetch_three()], lambda v: v + 1)
        # [2, 3, 4]
    """
    require_sequence("map_", entries)
    require_callable("map_", fn)

    def transform(values: list[T]) -> list[U]:
        logger.debug("map_ applying to %d values (label=%s)", len(values), label)
        return [fn(value) for value in values]

    return then(all_(entries, label), transform, label=label)


__all__ = ("map_",)
