"""Immutable mapping used for the case-rule lookup tables."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Generic, TypeVar

KT = TypeVar("KT")
VT = TypeVar("VT")


class FrozenDict(Mapping[KT, VT], Generic[KT, VT]):
    """A read-only, hashable mapping.

    Case rules are shared by every request built in the process, so their
    tables must not be mutable through a reference handed out to a caller.
    Extending a table always produces a new instance via `merged`.
    """

    __slots__ = ("_data", "_hash")

    def __init__(
        self,
        mapping: Mapping[KT, VT] | Iterable[tuple[KT, VT]] = (),
        /,
        **kwargs: VT,
    ) -> None:
        self._data: dict[KT, VT] = dict(mapping, **kwargs)
        self._hash: int | None = None

    def __getitem__(self, key: KT) -> VT:
        return self._data[key]

    def __iter__(self) -> Iterator[KT]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return dict(self._data) == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def merged(self, other: Mapping[KT, VT]) -> FrozenDict[KT, VT]:
        """Return a new mapping with `other`'s entries layered on top."""
        data = dict(self._data)
        data.update(other)
        return type(self)(data)
