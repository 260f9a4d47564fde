"""
Composition Hook Tests
"""

from dataclasses import dataclass
from typing import Any

from unionevent import DispatchController, EventKind, EventRegistry, TextBinding, on_compose, on_receive


@dataclass
class Field:
    text: Any = None


@dataclass
class IDView:
    content: Any
    id: Any


def test_on_compose_runs_action_once_and_returns_element():
    element = IDView(content=Field(), id="Ducky")
    seen = []

    result = on_compose(element, seen.append)

    assert result is element
    assert len(seen) == 1
    assert seen[0].kind is EventKind.ON_COMPOSE
    assert seen[0].last_id == "Ducky"


def test_on_compose_leaves_registry_untouched():
    registry = EventRegistry()
    controller = DispatchController(registry)
    seen = []

    on_compose(IDView(content=Field(), id="Ducky"), seen.append, controller=controller)

    assert len(seen) == 1
    assert "Ducky" not in registry


def test_on_receive_registers_and_returns_element():
    registry = EventRegistry()
    controller = DispatchController(registry)
    element = IDView(content=Field(), id="Ducky")
    titles = []

    result = on_receive(element, lambda event: titles.append(event.get_str("Title")), controller)

    assert result is element
    assert titles == []
    controller.send("Ducky", {"Title": "a puddle"})
    assert titles == ["a puddle"]


def test_explicit_ids_are_most_specific():
    registry = EventRegistry()
    controller = DispatchController(registry)
    element = IDView(content=Field(), id="outer")

    on_receive(element, lambda event: None, controller, ids=["explicit"], tags=["Quack"])

    record = controller.lookup("explicit")
    assert record.ids == ["outer", "explicit"]
    assert record.last_id == "explicit"
    assert record.tags == ["Quack"]
    assert controller.lookup("outer") is record


def test_receiver_can_update_bound_text():
    registry = EventRegistry()
    controller = DispatchController(registry)

    class Model:
        title = ""

    model = Model()
    binding = TextBinding.on(model, "title")

    def update(event):
        for text in event.text_bindings:
            text.value = event.get_str("Title") or ""

    on_receive(None, update, controller, ids=["Ducky"], text_bindings=[binding])
    controller.send("Ducky", {"Title": "a puddle"})

    assert model.title == "a puddle"
    assert binding.value == "a puddle"


def test_recomposition_keeps_sent_payload():
    registry = EventRegistry()
    controller = DispatchController(registry)

    on_receive(None, lambda event: None, controller, ids=["#selectedIndex"])
    controller.send("#selectedIndex", {"index": 4})
    on_receive(None, lambda event: None, controller, ids=["#selectedIndex"])

    assert controller.lookup("#selectedIndex").get_int("index") == 4
