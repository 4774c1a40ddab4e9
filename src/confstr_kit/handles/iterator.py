# handles/iterator.py

from __future__ import annotations

from typing import TYPE_CHECKING

from confstr_kit.parsers.models import Pair

from .resource import OwnedResource

if TYPE_CHECKING:
    from .handle import ConfStrHandle


class PairIterator(OwnedResource):
    """
    Forward-only cursor over the pairs of a live handle.

    States: created (before the first pair), active, exhausted. Exhausted is
    terminal; ask the handle for a new iterator to scan again. Not safe to
    advance from several threads; each consumer owns its own iterator.
    """

    def __init__(self, handle: ConfStrHandle) -> None:
        super().__init__()
        self._handle = handle
        # An empty pair set starts out exhausted.
        self._index = -1 if handle.conf_str.pairs else 0

    def _pairs(self) -> tuple[Pair, ...]:
        self._check_live()
        return self._handle.conf_str.pairs

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._pairs())

    def advance(self) -> bool:
        """Move to the next pair. Returns False once past the last one."""
        pairs = self._pairs()
        if self._index >= len(pairs):
            return False
        self._index += 1
        return self._index < len(pairs)

    @property
    def current(self) -> Pair | None:
        pairs = self._pairs()
        if 0 <= self._index < len(pairs):
            return pairs[self._index]
        return None

    @property
    def key(self) -> str | None:
        pair = self.current
        return pair.key if pair is not None else None

    @property
    def value(self) -> str | None:
        pair = self.current
        return pair.value if pair is not None else None

    def __iter__(self) -> PairIterator:
        return self

    def __next__(self) -> tuple[str, str]:
        if not self.advance():
            raise StopIteration
        pair = self.current
        assert pair is not None
        return pair.key, pair.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PairIterator):
            return NotImplemented
        if self.exhausted and other.exhausted:
            return True
        return self._handle is other._handle and self._index == other._index

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.released:
            return "PairIterator(<released>)"
        return f"PairIterator(index={self._index})"
