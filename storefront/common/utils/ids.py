import itertools
import threading
from typing import Dict, Iterator


class IdAllocator:
    """Monotonic integer ids, one counter per entity kind.

    Stores receive an allocator at construction so tests can share or
    restart numbering deterministically.
    """

    def __init__(self, start: int = 1) -> None:
        self._start = start
        self._counters: Dict[str, Iterator[int]] = {}
        self._lock = threading.Lock()

    def next_id(self, kind: str) -> int:
        with self._lock:
            counter = self._counters.get(kind)
            if counter is None:
                counter = self._counters[kind] = itertools.count(self._start)
            return next(counter)
