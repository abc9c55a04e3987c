"""
Errors raised by pledge itself.

Rejection reasons coming from user futures are never wrapped; these types
only cover misuse of the combinators and the result bridge.
"""

from __future__ import annotations


class InvalidArgument(TypeError):
    """A combinator was called with the wrong argument shape."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation


class RejectedValue(Exception):
    """Carries a non-exception error value through a rejected future."""

    def __init__(self, value: object) -> None:
        super().__init__(value)
        self.value = value


__all__ = ("InvalidArgument", "RejectedValue")
