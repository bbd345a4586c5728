"""Request timeouts expressed in milliseconds."""

from __future__ import annotations

from datetime import timedelta

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)


class Timeout:
    """A timeout given as milliseconds or as a ``timedelta``."""

    __slots__ = ("_ms",)

    def __init__(self, value: int | timedelta) -> None:
        if isinstance(value, timedelta):
            self._ms = value // timedelta(milliseconds=1)
        elif isinstance(value, int) and not isinstance(value, bool):
            self._ms = value
        else:
            raise TypeError(f"Timeout expects int milliseconds or timedelta, got {type(value).__name__}")

    def milliseconds(self) -> int:
        """Return the timeout in milliseconds, checked against the signed 64-bit range."""
        if self._ms > _LONG_MAX:
            raise OverflowError(f"Timeout: timeout value overflow: {self._ms} ms.")
        if self._ms < _LONG_MIN:
            raise OverflowError(f"Timeout: timeout value underflow: {self._ms} ms.")
        return self._ms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timeout):
            return NotImplemented
        return self._ms == other._ms

    def __hash__(self) -> int:
        return hash(self._ms)

    def __repr__(self) -> str:
        return f"Timeout({self._ms})"