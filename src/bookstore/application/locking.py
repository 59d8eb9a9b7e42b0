"""Per-owner locks for cart and wishlist mutations.

Each handler runs its load -> mutate -> save sequence while holding the
lock of the user it acts on, so two requests for the same user cannot
interleave. Requests for different users never contend.

The registry only keeps a lock while some caller still references it,
so a long-lived storefront does not accumulate one lock per user ever
seen.
"""

from __future__ import annotations

import threading
import weakref


class OwnerLocks:

    def __init__(self) -> None:
        self._locks: weakref.WeakValueDictionary[int, threading.Lock] = (
            weakref.WeakValueDictionary()
        )
        self._registry_lock = threading.Lock()

    def for_owner(self, user_id: int) -> threading.Lock:
        """Return the lock for *user_id*, creating it if nobody holds one."""
        with self._registry_lock:
            lock = self._locks.get(user_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[user_id] = lock
            return lock
