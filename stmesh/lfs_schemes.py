"""Local feature size approximations."""

from __future__ import annotations

from typing import Protocol

__all__ = ["LFSScheme", "Constant"]


class LFSScheme(Protocol):
    """A local feature size approximation with a known upper bound."""

    def __call__(self, vec) -> float: ...

    def max(self) -> float: ...


class Constant:
    """Returns the same local feature size everywhere."""

    def __init__(self, value: float) -> None:
        self._value = float(value)

    def __call__(self, vec) -> float:
        return self._value

    def max(self) -> float:
        """Return the largest value the approximation yields."""
        return self._value

    def __repr__(self) -> str:
        return f"Constant({self._value!r})"