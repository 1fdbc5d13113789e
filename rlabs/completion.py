"""Completion markers for lab cards."""

from typing import FrozenSet, Iterator, Set


class CompletionSet:
    """Set of card indexes the user has marked as complete.

    Lives for one session only; nothing is persisted.
    """

    def __init__(self):
        self._items: Set[int] = set()

    def toggle(self, item_id: int) -> bool:
        """Flip the marker for ``item_id``.

        Returns:
            True if the card is now complete, False otherwise
        """
        if item_id in self._items:
            self._items.discard(item_id)
            return False
        self._items.add(item_id)
        return True

    def contains(self, item_id: int) -> bool:
        return item_id in self._items

    def completed(self) -> FrozenSet[int]:
        return frozenset(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._items))
