"""Thread-safe named containers that the data manager keeps track of."""

from __future__ import annotations

import copy
import threading
from collections import deque
from typing import Any, Generic, TypeVar

T = TypeVar("T")
D = TypeVar("D")

DEFAULT_MAX_SIZE = 1000


class DataBlock(Generic[T]):
    """A named store for one kind of data."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.manager: Any = None
        self._lock = threading.Lock()

    def init(self, manager: Any) -> bool:
        """Attach the block to the manager that owns it."""
        self.manager = manager
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class RefVectorBlock(DataBlock[T]):
    """A growable list that holds references to the items it is given.

    Suited to large objects such as point clouds, which are never copied.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._items: list[T] = []

    def _store(self, item: T) -> T:
        return item

    def _load(self, item: T) -> T:
        return item

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("Index out of range")

    def push_back(self, item: T) -> None:
        with self._lock:
            self._items.append(self._store(item))

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def get(self, index: int) -> T:
        with self._lock:
            self._check(index)
            return self._load(self._items[index])

    def set(self, index: int, item: T) -> None:
        with self._lock:
            self._check(index)
            self._items[index] = self._store(item)

    def reset(self) -> None:
        with self._lock:
            self._items.clear()

    def all(self) -> list[T]:
        """Return a snapshot of the stored items, oldest first."""
        with self._lock:
            return list(self._items)


class CopyVectorBlock(RefVectorBlock[T]):
    """A growable list that keeps its own copies of the items it is given.

    Suited to small records such as IMU samples or poses.
    """

    def _store(self, item: T) -> T:
        return copy.deepcopy(item)

    def _load(self, item: T) -> T:
        return copy.deepcopy(item)

    def get_ref(self, index: int) -> T:
        """Return the stored item itself, so changes to it are kept."""
        with self._lock:
            self._check(index)
            return self._items[index]


class RefDequeBlock(DataBlock[T]):
    """A bounded double-ended queue of references.

    When the queue grows past ``max_size`` the item at the opposite end
    from the one just added is dropped.
    """

    def __init__(self, name: str, max_size: int = DEFAULT_MAX_SIZE) -> None:
        super().__init__(name)
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self._items: deque[T] = deque(maxlen=max_size)

    def _store(self, item: T) -> T:
        return item

    def _load(self, item: T) -> T:
        return item

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("Index out of range")

    def push_back(self, item: T) -> None:
        with self._lock:
            self._items.append(self._store(item))

    def push_front(self, item: T) -> None:
        with self._lock:
            self._items.appendleft(self._store(item))

    def pop_front(self) -> T | None:
        """Remove and return the first item, or None when empty."""
        with self._lock:
            return self._items.popleft() if self._items else None

    def pop_back(self) -> T | None:
        """Remove and return the last item, or None when empty."""
        with self._lock:
            return self._items.pop() if self._items else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def get(self, index: int) -> T:
        with self._lock:
            self._check(index)
            return self._load(self._items[index])

    def reset(self) -> None:
        with self._lock:
            self._items.clear()

    def all(self) -> list[T]:
        """Return a snapshot of the queue, front first."""
        with self._lock:
            return list(self._items)


class CopyDequeBlock(RefDequeBlock[T]):
    """A bounded double-ended queue that keeps its own copies of items."""

    def _store(self, item: T) -> T:
        return copy.deepcopy(item)

    def _load(self, item: T) -> T:
        return copy.deepcopy(item)

    def pop_front(self) -> T:
        """Remove and return the first item; raise IndexError when empty."""
        with self._lock:
            if not self._items:
                raise IndexError("Deque is empty")
            return self._items.popleft()

    def pop_back(self) -> T:
        """Remove and return the last item; raise IndexError when empty."""
        with self._lock:
            if not self._items:
                raise IndexError("Deque is empty")
            return self._items.pop()

    def try_pop_front(self, default: D = None) -> T | D:
        with self._lock:
            return self._items.popleft() if self._items else default

    def try_pop_back(self, default: D = None) -> T | D:
        with self._lock:
            return self._items.pop() if self._items else default

    def get_ref(self, index: int) -> T:
        """Return the stored item itself, so changes to it are kept."""
        with self._lock:
            self._check(index)
            return self._items[index]

    def set(self, index: int, item: T) -> None:
        with self._lock:
            self._check(index)
            self._items[index] = self._store(item)