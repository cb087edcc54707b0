"""A blocking, cancelable FIFO queue shared between producer and consumer threads."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class ThreadSafeQueue(Generic[T]):
    """FIFO queue whose consumers can be woken up by cancellation."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._emptied = threading.Condition(self._lock)
        self._canceled = False

    def enqueue(self, item: T) -> None:
        """Append an item and wake one waiting consumer."""
        with self._lock:
            self._items.append(item)
            self._not_empty.notify()

    def dequeue(self) -> Optional[T]:
        """Wait for an item; return None only once the queue is canceled."""
        with self._lock:
            while not self._items and not self._canceled:
                self._not_empty.wait()
            if self._canceled:
                return None
            item = self._items.popleft()
            self._emptied.notify_all()
            return item

    def dequeue_immediate(self) -> Optional[T]:
        """Return the next item at once, or None if the queue is empty."""
        with self._lock:
            if not self._items:
                return None
            item = self._items.popleft()
            self._emptied.notify_all()
            return item

    def cancel(self) -> None:
        """Cancel the queue and wake every waiting consumer."""
        with self._lock:
            self._canceled = True
            self._not_empty.notify_all()
            self._emptied.notify_all()

    def wait_empty(self) -> bool:
        """Block until the queue drains or is canceled; report whether it is empty."""
        with self._lock:
            while self._items and not self._canceled:
                self._emptied.wait()
            return not self._items

    def is_empty(self) -> bool:
        """Whether the queue currently holds no items."""
        with self._lock:
            return not self._items