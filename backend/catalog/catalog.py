"""
The loaded, immutable eatery collection.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from operator import attrgetter
from pathlib import Path
from types import MappingProxyType

from models import Eatery


@dataclass(frozen=True)
class DroppedBlob:
    """A source entry that could not be read or parsed during load."""

    path: Path
    reason: str


@dataclass(frozen=True)
class Catalog:
    """
    Eateries sorted ascending by id, plus an id index.

    Sorting is stable, so records sharing an id keep the order they were
    given in; the index holds the first of them.
    """

    eateries: tuple[Eatery, ...] = ()
    dropped: tuple[DroppedBlob, ...] = ()
    _by_id: Mapping[int, Eatery] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.eateries, key=attrgetter("id")))
        index: dict[int, Eatery] = {}
        for eatery in ordered:
            index.setdefault(eatery.id, eatery)
        object.__setattr__(self, "eateries", ordered)
        object.__setattr__(self, "dropped", tuple(self.dropped))
        object.__setattr__(self, "_by_id", MappingProxyType(index))

    @classmethod
    def from_eateries(
        cls, eateries: Iterable[Eatery], dropped: Iterable[DroppedBlob] = ()
    ) -> "Catalog":
        return cls(eateries=tuple(eateries), dropped=tuple(dropped))

    def __len__(self) -> int:
        return len(self.eateries)

    def lookup(self, eatery_id: int) -> Eatery | None:
        return self._by_id.get(eatery_id)

    def duplicate_ids(self) -> list[int]:
        """Ids carried by more than one eatery, ascending."""
        return sorted(
            {e.id for e in self.eateries if self._by_id[e.id] is not e}
        )
