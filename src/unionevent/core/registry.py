"""
Event Registry

Maps identifiers to the most recently registered ON_RECEIVE record.
The registry owns every stored record; one slot per identifier.
"""

import logging
import threading
from typing import Any, Dict, List, Optional

from .identity import EventKind, EventRecord, Identifier, coerce_payload

logger = logging.getLogger(__name__)


class EventRegistry:
    """
    Process-wide store of event registrations.

    Construct one at application start and pass it to everything that
    registers or sends. All operations are synchronous. A reentrant lock
    guards the slots so a handler running inside ``send`` may itself call
    ``send`` or ``register`` on the same thread.
    """

    def __init__(self):
        self._slots: Dict[Identifier, EventRecord] = {}
        self._lock = threading.RLock()

    def register(self, record: EventRecord) -> None:
        """
        Store ``record`` under each of its identifiers.

        When a slot is already occupied the new record takes over the old
        record's payload, so values pushed with ``send`` survive the element
        being composed again. Handler and kind come from the new record.
        A record without identifiers is not stored anywhere.
        """
        with self._lock:
            for identifier in record.ids:
                old = self._slots.get(identifier)
                if old is not None:
                    record.payload = dict(old.payload)
                    logger.debug(f"Replacing existing event for {identifier!r}")
                else:
                    logger.debug(f"Registering event for {identifier!r}")
                self._slots[identifier] = record

    def lookup(self, identifier: Identifier) -> Optional[EventRecord]:
        """Get the record registered for ``identifier``, if any."""
        with self._lock:
            return self._slots.get(identifier)

    def send(self, identifier: Identifier, payload: Optional[Dict[str, Any]] = None) -> bool:
        """
        Deliver ``payload`` to the record registered for ``identifier``.

        The record's payload is replaced and its handler runs before this
        returns, on the caller's thread. A missing recipient is not an error.

        Returns:
            True if a handler was invoked, False if nothing is registered
        """
        with self._lock:
            record = self._slots.get(identifier)
            if record is None:
                logger.debug(f"No receiver registered for {identifier!r}")
                return False
            data = coerce_payload(payload)
            record.payload = data
            record.kind = EventKind.ON_RECEIVE
            logger.debug(f"Sending {sorted(data)} to {identifier!r}")
            record.invoke()
            return True

    def clear(self) -> int:
        """Deregister every record. Returns how many slots were dropped."""
        with self._lock:
            count = len(self._slots)
            self._slots.clear()
            return count

    def identifiers(self) -> List[Identifier]:
        with self._lock:
            return list(self._slots)

    def __contains__(self, identifier: Identifier) -> bool:
        with self._lock:
            return identifier in self._slots

    def __len__(self) -> int:
        with self._lock:
            return len(self._slots)

    def __repr__(self) -> str:
        return f"EventRegistry({len(self)} slots)"
