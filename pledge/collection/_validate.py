"""
Synchronous argument checks shared by the sequence combinators.
"""

from __future__ import annotations

from collections.abc import Sequence

from pledge._errors import InvalidArgument


def require_sequence(operation: str, entries: object) -> None:
    if not isinstance(entries, Sequence) or isinstance(entries, (str, bytes, bytearray)):
        raise InvalidArgument(
            operation,
            f"expected a sequence of entries, got {type(entries).__name__}",
        )


def require_callable(operation: str, fn: object) -> None:
    if not callable(fn):
        raise InvalidArgument(
            operation,
            f"expected a callable as second argument, got {type(fn).__name__}",
        )


__all__ = ("require_sequence", "require_callable")
