"""
Application lifecycle

Drops every registration when the application goes to the background, so
handlers holding on to torn-down UI state are never called later.
"""

import logging
from enum import Enum

from .registry import EventRegistry

logger = logging.getLogger(__name__)


class AppPhase(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    BACKGROUND = "background"


class LifecycleMonitor:
    def __init__(self, registry: EventRegistry, phase: AppPhase = AppPhase.ACTIVE):
        self.registry = registry
        self.phase = phase

    def transition(self, phase: AppPhase) -> int:
        """Move to ``phase``. Returns the number of registrations dropped."""
        previous, self.phase = self.phase, phase
        logger.debug(f"Lifecycle {previous.value} -> {phase.value}")
        if phase is not AppPhase.BACKGROUND:
            return 0
        dropped = self.registry.clear()
        logger.info(f"Cleared {dropped} event registrations on entering background")
        return dropped
