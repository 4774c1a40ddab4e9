# parsers/models.py

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Pair:
    key: str
    value: str
    offset_start: int
    offset_end: int


@dataclass(frozen=True, repr=False)
class ConfStr:
    """
    Parsed configuration string.

    Immutable once built. Pairs keep input order; keys are unique and
    looked up case-sensitively.
    """

    service: str
    pairs: tuple[Pair, ...] = ()

    def __post_init__(self) -> None:
        if not self.service:
            raise ValueError("service must not be empty")

        pairs = tuple(self.pairs)
        index: dict[str, Pair] = {}
        for pair in pairs:
            if pair.key in index:
                raise ValueError(f"duplicate key {pair.key!r}")
            index[pair.key] = pair

        object.__setattr__(self, "pairs", pairs)
        # Plain attribute, not a field: stays out of eq, hash and asdict.
        object.__setattr__(self, "_index", index)

    def get(self, key: str) -> str | None:
        pair = self._index.get(key)
        if pair is None:
            return None
        return pair.value

    @property
    def params(self) -> Mapping[str, str]:
        # read-only view, in input order
        return MappingProxyType({p.key: p.value for p in self.pairs})

    def keys(self) -> list[str]:
        return [p.key for p in self.pairs]

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for pair in self.pairs:
            yield pair.key, pair.value

    def __repr__(self) -> str:
        # Values are hidden, they may hold credentials.
        return f"ConfStr(service={self.service!r}, keys={self.keys()!r})"
