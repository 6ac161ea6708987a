from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List


class UserLocks:
    """One lock per user id; every read-modify-write of a user runs under it.

    Note: An entry lives only while some caller holds or waits for it, so ids
    that were only asked about once do not accumulate.
    """

    def __init__(self):
        self._guard = threading.Lock()
        # user_id -> [lock, number of holders and waiters]
        self._locks: Dict[str, List] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    @contextmanager
    def hold(self, user_id: str) -> Iterator[None]:
        with self._guard:
            entry = self._locks.setdefault(user_id, [threading.Lock(), 0])
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[user_id]
