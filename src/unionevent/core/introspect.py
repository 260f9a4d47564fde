"""
Element Introspection

Recovers identifying metadata (identifiers, tags, text bindings) for a
composed element.

Two forms are supported:

- Explicit: the caller passes an ``ElementMetadata`` (or plain ids/tags to
  the hooks). This is the preferred form.
- Structural: ``introspect()`` walks a tree of labeled fields and picks
  values out by conventional field names. A decorated element is a chain
  of wrappers, each holding the next one under ``content``. Whatever is
  found is best effort; unknown labels are skipped.
"""

import dataclasses
from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Set, Tuple

from .identity import EventRecord, Identifier, TextBinding

ID_LABELS = frozenset({"id", "identifier"})
MODIFIER_LABEL = "modifier"
TEXT_LABELS = frozenset({"_text", "text", "text_binding"})
CHILD_LABELS = frozenset({"content", "wrapped", "child"})

# Paths below a modifier where a tag value may sit
TAG_PATHS: Tuple[Tuple[str, ...], ...] = (("tag",), ("value", "tagged"))


@dataclass
class ElementMetadata:
    """Identifying metadata of one element."""
    ids: List[Identifier] = field(default_factory=list)
    tags: List[Hashable] = field(default_factory=list)
    text_bindings: List[TextBinding] = field(default_factory=list)

    def apply_to(self, record: EventRecord) -> EventRecord:
        record.ids.extend(self.ids)
        record.tags.extend(self.tags)
        record.text_bindings.extend(self.text_bindings)
        return record


def _is_hashable(value: Any) -> bool:
    if not isinstance(value, Hashable):
        return False
    try:
        hash(value)
    except TypeError:
        # e.g. a tuple holding a list
        return False
    return True


def labeled_fields(node: Any) -> Iterator[Tuple[str, Any]]:
    """Yield ``(label, value)`` pairs for a node, in declaration order."""
    if isinstance(node, Mapping):
        for label, value in node.items():
            if isinstance(label, str):
                yield label, value
    elif dataclasses.is_dataclass(node) and not isinstance(node, type):
        for f in dataclasses.fields(node):
            yield f.name, getattr(node, f.name)
    elif hasattr(node, "__dict__") and not isinstance(node, type):
        yield from vars(node).items()


def descendant(node: Any, *path: str) -> Optional[Any]:
    """Follow a path of labels down from ``node``; ``None`` when it breaks."""
    for label in path:
        found = False
        for name, value in labeled_fields(node):
            if name == label:
                node, found = value, True
                break
        if not found:
            return None
    return node


class Introspector:
    """Walks one element description and collects its metadata."""

    def __init__(self):
        self.metadata = ElementMetadata()
        self._seen: Set[int] = set()

    def walk(self, node: Any) -> ElementMetadata:
        if node is None or id(node) in self._seen:
            return self.metadata
        self._seen.add(id(node))

        for label, value in labeled_fields(node):
            if label in CHILD_LABELS:
                self.walk(value)
            elif label in ID_LABELS:
                if value is not None and _is_hashable(value):
                    self.metadata.ids.append(value)
            elif label == MODIFIER_LABEL:
                self._collect_tag(value)
            elif label in TEXT_LABELS:
                if isinstance(value, TextBinding):
                    self.metadata.text_bindings.append(value)
        return self.metadata

    def _collect_tag(self, modifier: Any) -> None:
        for path in TAG_PATHS:
            tagged = descendant(modifier, *path)
            if tagged is not None and _is_hashable(tagged):
                self.metadata.tags.append(tagged)
                return


def introspect(element: Any) -> ElementMetadata:
    """Collect identifiers, tags and text bindings from an element tree."""
    return Introspector().walk(element)


def fill(record: EventRecord, element: Any) -> EventRecord:
    """Populate ``record`` with the metadata found in ``element``."""
    return introspect(element).apply_to(record)
