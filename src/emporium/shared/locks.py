"""Per-identity mutual exclusion for read-modify-write sequences.

Cart, order and wishlist commands load an aggregate, change it and save it
back. When commands for the same owner run on different threads, interleaving
those steps would lose one update, so each command runs, through to its
commit, while holding the owner's lock. Async routes on one event loop never
interleave here anyway: command processing has no await points.

Locks are created on demand and dropped once nothing references them. They are
not re-entrant; a command must not process another command for the same owner.
"""

import threading
import weakref
from contextlib import contextmanager

from protean.utils.globals import current_domain


class _OwnerLock:
    def __init__(self):
        self.lock = threading.Lock()


_registry_guard = threading.Lock()
_locks = weakref.WeakValueDictionary()


def _lock_for(identity: str) -> _OwnerLock:
    with _registry_guard:
        owner_lock = _locks.get(identity)
        if owner_lock is None:
            owner_lock = _OwnerLock()
            _locks[identity] = owner_lock
        return owner_lock


@contextmanager
def identity_lock(identity):
    owner_lock = _lock_for(str(identity))
    with owner_lock.lock:
        yield


def process_exclusively(identity, command):
    """Process `command` synchronously while holding `identity`'s lock.

    The unit of work commits before the lock is released.
    """
    with identity_lock(identity):
        return current_domain.process(command, asynchronous=False)
