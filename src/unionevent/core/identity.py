"""
Identity & Payload Model

The event record that links a composed UI element to a handler, and the
value types that can travel in a payload.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Hashable, List, Optional, Union
from uuid import UUID

from pydantic import TypeAdapter, ValidationError

from ..errors import PayloadError

# A default value for "no UUID"
ZERO_UUID = UUID("00000000-0000-0000-0000-000000000000")

Identifier = Hashable
PayloadValue = Union[bool, int, UUID, str]
Payload = Dict[str, PayloadValue]

_payload_adapter = TypeAdapter(Payload)


def coerce_payload(data: Optional[Dict[str, Any]]) -> Payload:
    """
    Validate a payload mapping against the supported value union.

    Keys must be strings; values must be ``str``, ``int``, ``bool`` or
    ``UUID``. Validation is strict, so ``"1"`` stays a string and a UUID
    string is not turned into a ``UUID``.

    Raises:
        PayloadError: If a key or value has an unsupported type
    """
    if not data:
        return {}
    try:
        return _payload_adapter.validate_python(dict(data), strict=True)
    except ValidationError as e:
        raise PayloadError(f"Unsupported payload: {e}") from e


class EventKind(Enum):
    """What a record is for."""
    ON_COMPOSE = "on_compose"    # Observation of a composition pass, never stored
    ON_RECEIVE = "on_receive"    # Addressable target for send()


class TextBinding:
    """A two-way string binding onto some piece of UI state."""

    def __init__(self, get: Callable[[], str], set: Callable[[str], None]):
        self._get = get
        self._set = set

    @classmethod
    def on(cls, obj: Any, attr: str) -> 'TextBinding':
        """Bind to a string attribute of an object."""
        return cls(lambda: getattr(obj, attr), lambda value: setattr(obj, attr, value))

    @property
    def value(self) -> str:
        return self._get()

    @value.setter
    def value(self, new_value: str) -> None:
        self._set(new_value)

    def __repr__(self) -> str:
        return f"TextBinding({self.value!r})"


EventHandler = Callable[['EventRecord'], None]


@dataclass(eq=False)
class EventRecord:
    """
    The unit of registration: identifiers, payload, handler and kind.

    ``ids`` are ordered from the outermost to the innermost wrapper of the
    owning element, so the last one is the most specific.

    The handler must never ``send`` to its own identifier; that recurses
    forever.
    """
    kind: EventKind = EventKind.ON_COMPOSE
    handler: Optional[EventHandler] = None
    ids: List[Identifier] = field(default_factory=list)
    payload: Payload = field(default_factory=dict)
    tags: List[Hashable] = field(default_factory=list)
    text_bindings: List[TextBinding] = field(default_factory=list)

    @property
    def last_id(self) -> Optional[Identifier]:
        """The most specific identifier, if any."""
        return self.ids[-1] if self.ids else None

    def invoke(self) -> None:
        if self.handler is not None:
            self.handler(self)

    def _typed(self, key: str, kind: type) -> Any:
        value = self.payload.get(key)
        # bool is an int subclass; keep the variants apart
        if kind is int and isinstance(value, bool):
            return None
        return value if isinstance(value, kind) else None

    def get_str(self, key: str) -> Optional[str]:
        return self._typed(key, str)

    def get_int(self, key: str) -> Optional[int]:
        return self._typed(key, int)

    def get_bool(self, key: str) -> Optional[bool]:
        return self._typed(key, bool)

    def get_uuid(self, key: str) -> Optional[UUID]:
        return self._typed(key, UUID)
