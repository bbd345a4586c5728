"""Basic value types: URLs and case-insensitive header maps."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping


class Url(str):
    """A URL string; concatenation keeps the ``Url`` type."""

    __slots__ = ()

    def __add__(self, other: object) -> Url:
        if not isinstance(other, str):
            return NotImplemented
        return Url(str.__add__(self, other))


class Header(MutableMapping[str, str]):
    """HTTP header fields with case-insensitive keys.

    Iteration is ordered by the lower-cased key. Assigning to a key that
    already exists under another spelling keeps the first spelling.
    """

    def __init__(
        self,
        data: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    ) -> None:
        self._fields: dict[str, tuple[str, str]] = {}
        if data is not None:
            self.update(data)

    def __getitem__(self, key: str) -> str:
        return self._fields[key.lower()][1]

    def __setitem__(self, key: str, value: str) -> None:
        folded = key.lower()
        existing = self._fields.get(folded)
        original_key = existing[0] if existing is not None else key
        self._fields[folded] = (original_key, value)

    def __delitem__(self, key: str) -> None:
        folded = key.lower()
        if folded not in self._fields:
            raise KeyError(key)
        self._fields.pop(folded)

    def __iter__(self) -> Iterator[str]:
        for folded in sorted(self._fields):
            yield self._fields[folded][0]

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._fields

    def __repr__(self) -> str:
        return f"Header({dict(self.items())!r})"