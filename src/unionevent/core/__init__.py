"""
UnionEvent Core Module

Event registration and targeted dispatch.
Framework-agnostic: no UI framework imports.
"""

from .identity import (
    EventKind, EventRecord, TextBinding, Identifier, Payload, PayloadValue,
    ZERO_UUID, coerce_payload,
)
from .introspect import ElementMetadata, Introspector, introspect, fill
from .registry import EventRegistry
from .controller import DispatchController
from .hooks import on_compose, on_receive, build_record
from .lifecycle import AppPhase, LifecycleMonitor

__all__ = [
    "EventKind",
    "EventRecord",
    "TextBinding",
    "Identifier",
    "Payload",
    "PayloadValue",
    "ZERO_UUID",
    "coerce_payload",
    "ElementMetadata",
    "Introspector",
    "introspect",
    "fill",
    "EventRegistry",
    "DispatchController",
    "on_compose",
    "on_receive",
    "build_record",
    "AppPhase",
    "LifecycleMonitor",
]
