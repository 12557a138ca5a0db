"""Bidirectional mapping between location names and dense integer indices."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from routeplan.types.base import NodeIndex


class LocationRegistry:
    """Assigns stable indices to location names.

    Indices start at 0 and grow by one for every new name; they are never
    reused. Names are case-sensitive and matched exactly.

    Attributes:
        _names: Location names in index order.
        _index: Map from location name to its index.
    """

    def __init__(self) -> None:
        self._names: List[str] = []
        self._index: Dict[str, NodeIndex] = {}

    def resolve(self, name: str) -> NodeIndex:
        """Return the index of ``name``, registering it first if it is new.

        Registration is a side effect: an unseen name grows the registry by
        one entry. Use `index_of()` for a read-only lookup.

        Args:
            name: Location name.

        Returns:
            NodeIndex: The existing or newly allocated index.
        """
        index = self._index.get(name)
        if index is None:
            index = len(self._names)
            self._names.append(name)
            self._index[name] = index
        return index

    def index_of(self, name: str) -> Optional[NodeIndex]:
        """Return the index of ``name`` or None if it was never registered."""
        return self._index.get(name)

    def name_of(self, index: NodeIndex) -> str:
        """Return the name registered under ``index``.

        Args:
            index: A previously allocated index.

        Returns:
            str: The location name.

        Raises:
            IndexError: If ``index`` was never allocated.
        """
        if not 0 <= index < len(self._names):
            raise IndexError(f"Location index {index} is not registered.")
        return self._names[index]

    def names(self) -> List[str]:
        """Return all registered names in index order."""
        return list(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"LocationRegistry({self._names!r})"
