"""
Dispatch Controller

Facade used by application code to register receivers and send data to
them. Holds a reference to one ``EventRegistry``, passed in at
construction or attached once during setup.
"""

import logging
from typing import Any, Dict, Optional

from ..errors import UsageFault
from .identity import EventKind, EventRecord, Identifier
from .registry import EventRegistry

logger = logging.getLogger(__name__)

MISSING_REGISTRY = "Requires an EventRegistry to be attached to the DispatchController at application start"


class DispatchController:
    """Routes registrations and sends to a single registry."""

    def __init__(self, registry: Optional[EventRegistry] = None):
        self._registry = registry

    @property
    def registry(self) -> Optional[EventRegistry]:
        return self._registry

    def attach(self, registry: EventRegistry) -> None:
        """Wire the registry in after construction."""
        if self._registry is not None and self._registry is not registry:
            raise UsageFault("DispatchController already has a registry attached")
        self._registry = registry

    def _require_registry(self) -> EventRegistry:
        if self._registry is None:
            logger.error(MISSING_REGISTRY)
            raise UsageFault(MISSING_REGISTRY)
        return self._registry

    def register_on_compose(self, record: EventRecord) -> EventRecord:
        """Run an ON_COMPOSE record's handler once. The record is not stored."""
        record.kind = EventKind.ON_COMPOSE
        record.invoke()
        return record

    def register_on_receive(self, record: EventRecord) -> EventRecord:
        """Make ``record`` addressable by ``send`` under each of its ids."""
        registry = self._require_registry()
        record.kind = EventKind.ON_RECEIVE
        registry.register(record)
        return record

    def lookup(self, identifier: Identifier) -> Optional[EventRecord]:
        """Get the registration details for ``identifier``."""
        if self._registry is None:
            return None
        return self._registry.lookup(identifier)

    def send(self, identifier: Identifier, payload: Optional[Dict[str, Any]] = None) -> bool:
        """
        Send ``payload`` to the receiver registered under ``identifier``.

        The receiver's handler runs synchronously before this returns. If
        nothing is registered (the element is not on screen) nothing happens.

        Returns:
            True if a receiver was invoked
        """
        return self._require_registry().send(identifier, payload)

    def clear(self) -> int:
        return self._require_registry().clear()
