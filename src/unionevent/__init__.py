"""
UnionEvent - Targeted data delivery to composed UI elements

Pass data to one specific element from anywhere in the application, not
just down the component tree, and build/parse the deep links that usually
carry that data into the application.
"""

from .core import (
    EventKind, EventRecord, TextBinding, ZERO_UUID,
    ElementMetadata, introspect,
    EventRegistry, DispatchController,
    on_compose, on_receive,
    AppPhase, LifecycleMonitor,
)
from .deeplink import DeepLink, build_url, parse_url, key_values_from_query
from .errors import UnionEventError, UsageFault, PayloadError, DeepLinkError

__all__ = [
    # Core
    'EventKind',
    'EventRecord',
    'TextBinding',
    'ZERO_UUID',
    'ElementMetadata',
    'introspect',
    'EventRegistry',
    'DispatchController',
    'on_compose',
    'on_receive',
    'AppPhase',
    'LifecycleMonitor',

    # Deep links
    'DeepLink',
    'build_url',
    'parse_url',
    'key_values_from_query',

    # Errors
    'UnionEventError',
    'UsageFault',
    'PayloadError',
    'DeepLinkError',
]
