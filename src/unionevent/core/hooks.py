"""
Composition Hooks

Glue between "an element was composed" and the registry.

``on_compose`` observes a composition pass; ``on_receive`` makes the
element a target for ``DispatchController.send``. Both return the element
unchanged so calls can be chained while building a tree.
"""

from typing import Any, Hashable, Iterable, Optional, TypeVar

from .controller import DispatchController
from .identity import EventHandler, EventKind, EventRecord, Identifier, TextBinding
from .introspect import ElementMetadata, fill

E = TypeVar('E')

# ON_COMPOSE records never touch a registry
compose_observer = DispatchController()


def build_record(
    element: Any,
    kind: EventKind,
    action: EventHandler,
    ids: Iterable[Identifier] = (),
    tags: Iterable[Hashable] = (),
    text_bindings: Iterable[TextBinding] = (),
) -> EventRecord:
    """
    Create a fresh record for ``element``.

    Metadata found by walking ``element`` comes first, explicit values are
    appended after it so an explicit id is the most specific one.
    """
    record = EventRecord(kind=kind, handler=action)
    if element is not None:
        fill(record, element)
    ElementMetadata(list(ids), list(tags), list(text_bindings)).apply_to(record)
    return record


def on_compose(
    element: E,
    action: EventHandler,
    *,
    controller: Optional[DispatchController] = None,
    ids: Iterable[Identifier] = (),
    tags: Iterable[Hashable] = (),
    text_bindings: Iterable[TextBinding] = (),
) -> E:
    """
    Run ``action`` once for this composition pass of ``element``.

    Example:
        on_compose(field, lambda event: print(f"{event.last_id} updated."), ids=["Ducky"])
    """
    record = build_record(element, EventKind.ON_COMPOSE, action, ids, tags, text_bindings)
    (controller or compose_observer).register_on_compose(record)
    return element


def on_receive(
    element: E,
    action: EventHandler,
    controller: DispatchController,
    *,
    ids: Iterable[Identifier] = (),
    tags: Iterable[Hashable] = (),
    text_bindings: Iterable[TextBinding] = (),
) -> E:
    """
    Register ``action`` to run when ``controller.send`` targets one of the
    element's identifiers.

    Example:
        on_receive(field, lambda event: print(event.get_str("Title")), controller, ids=["Ducky"])
        controller.send("Ducky", {"Title": "a puddle"})
    """
    record = build_record(element, EventKind.ON_RECEIVE, action, ids, tags, text_bindings)
    controller.register_on_receive(record)
    return element
