"""Cursor over an ordered, immutable sequence."""

from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class SelectableList(Generic[T]):
    """Ordered items plus an optional cursor.

    The cursor is either None or a valid index; an empty list never has one.
    Items are only ever swapped wholesale through replace().
    """

    def __init__(self, items: Iterable[T] = (), index: Optional[int] = None):
        self._items: tuple[T, ...] = ()
        self._index: Optional[int] = None
        self.replace(items, index)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SelectableList({len(self._items)} items, index={self._index})"

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    @property
    def index(self) -> Optional[int]:
        return self._index

    def selected(self) -> Optional[T]:
        """Item under the cursor, or None."""
        if self._index is None:
            return None
        return self._items[self._index]

    def replace(self, items: Iterable[T], index: Optional[int] = None):
        """Swap sequence and cursor together."""
        items = tuple(items)
        if index is not None and not 0 <= index < len(items):
            raise ValueError(f"cursor {index} out of range for {len(items)} items")
        self._items = items
        self._index = index

    def select(self, index: int):
        if not 0 <= index < len(self._items):
            raise ValueError(f"cursor {index} out of range for {len(self._items)} items")
        self._index = index

    def advance(self):
        if not self._items:
            return
        if self._index is None:
            self._index = 0
        elif self._index < len(self._items) - 1:
            self._index += 1

    def retreat(self):
        if not self._items:
            return
        if self._index is None or self._index == 0:
            self._index = 0
        else:
            self._index -= 1

    def jump_to_start(self):
        if self._items:
            self._index = 0

    def jump_to_end(self):
        if self._items:
            self._index = len(self._items) - 1

    def index_of(self, predicate: Callable[[T], bool]) -> Optional[int]:
        """Index of the first item matching predicate."""
        for i, item in enumerate(self._items):
            if predicate(item):
                return i
        return None
