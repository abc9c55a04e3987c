"""
Lift — bridges between futures and kungfu results.

    from pledge import lift

    match await lift.attempt(C.hash_(entries)):
        case Ok(values): ...
        case Error(exc): ...
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable

from kungfu import Error, LazyCoroResult, Ok, Result
from combinators import lift as L

from pledge._errors import RejectedValue
from pledge._future import reject, resolve

# ═══════════════════════════════════════════════════════════════════════════════
# Future → Result
# ═══════════════════════════════════════════════════════════════════════════════


def attempt[T](entry: Awaitable[T]) -> LazyCoroResult[T, Exception]:
    """
    Await a future lazily, turning a rejection into Error(reason).

    The reason object is passed through unchanged.
    """
    async def wait() -> T:
        return await entry

    return L.catching_async(wait, on_error=lambda e: e)


# ═══════════════════════════════════════════════════════════════════════════════
# Result → Future
# ═══════════════════════════════════════════════════════════════════════════════


def from_result[T, E](result: Result[T, E]) -> asyncio.Future[T]:
    """
    Settled future from a Result.

    Error values that are not exceptions are wrapped in RejectedValue.
    """
    match result:
        case Ok(value):
            return resolve(value)
        case Error(error):
            if isinstance(error, BaseException):
                return reject(error)
            return reject(RejectedValue(error))
    raise TypeError(f"expected Ok or Error, got {type(result).__name__}")


__all__ = ("attempt", "from_result")
