# server/core/state.py

from threading import Lock
from collections import defaultdict


_locks_guard = Lock()
_store_locks = defaultdict(Lock)


def with_store_lock(path) -> Lock:
    """
    Returns the writer lock for a hosts file.
    Every store opened on the same resolved path shares one lock.
    """
    with _locks_guard:
        return _store_locks[str(path)]
