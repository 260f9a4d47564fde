"""
Demo Application Tests

Drives the item list and deep-link entry point through Starlette's test client.
"""

import pytest
from starlette.testclient import TestClient

from unionevent import build_url
from unionevent.config import ApplicationConfig, Environment
from unionevent.persistence import MemoryItemStore

from app.main import create_app
from app.routes import handle_deeplink

BUNDLE_ID = "com.example.openthings"


@pytest.fixture
def config():
    config = ApplicationConfig.for_environment(Environment.TESTING)
    config.deeplink.bundle_id = BUNDLE_ID
    return config


@pytest.fixture
def app(config):
    return create_app(config, MemoryItemStore())


@pytest.fixture
def client(app):
    return TestClient(app)


def selection_link(uuid, scheme=BUNDLE_ID, path=("Children",)):
    return build_url(scheme, list(path), {"index": str(uuid)})


def test_index_registers_selection_receiver(app, client):
    response = client.get("/")

    assert response.status_code == 200
    assert "Select an item" in response.text
    assert app.state.controller.lookup("#selectedIndex") is not None


def test_add_and_delete_item(app, client):
    client.post("/items")
    items = app.state.store.list_items()
    assert len(items) == 1

    response = client.get(f"/items/{items[0].uuid}")
    assert selection_link(items[0].uuid) in response.text

    client.post(f"/items/{items[0].uuid}/delete")
    assert app.state.store.count() == 0


def test_unknown_item(client):
    assert "Not found" in client.get("/items/not-a-uuid").text


def test_deeplink_selects_item(app, client):
    item = app.state.store.add()
    client.get("/")  # list is on screen

    response = client.get("/open", params={"url": selection_link(item.uuid)})

    assert response.status_code == 200
    assert app.state.view.selected_item == item.uuid
    assert f"Selected: {item.uuid}" in response.text
    assert app.state.controller.lookup("#selectedIndex").get_uuid("uuid") == item.uuid


def test_deeplink_before_list_is_composed_is_ignored(app, client):
    item = app.state.store.add()

    client.get("/open", params={"url": selection_link(item.uuid)}, follow_redirects=False)

    assert app.state.view.selected_item is None


@pytest.mark.parametrize("url", [
    selection_link("f3e0ee97-c3f4-4404-beb5-a2a52633b9ab", scheme="org.someone.else"),
    selection_link("f3e0ee97-c3f4-4404-beb5-a2a52633b9ab", path=("Parents",)),
    build_url(BUNDLE_ID, ["Children"], {"index": "1"}),
    "not a link",
])
def test_foreign_or_malformed_links_are_ignored(app, config, url):
    TestClient(app).get("/")

    assert handle_deeplink(url, app.state.controller, config.deeplink) is False
    assert app.state.view.selected_item is None


def test_background_clears_receivers(app, client):
    client.get("/")
    assert len(app.state.registry) == 1

    response = client.post("/lifecycle/background")

    assert response.json() == {"phase": "background", "cleared": 1}
    assert len(app.state.registry) == 0


def test_unknown_lifecycle_phase(app, client):
    client.get("/")

    assert client.post("/lifecycle/sideways").json()["cleared"] == 0
    assert len(app.state.registry) == 1


def test_deeplink_after_returning_from_background(app, client):
    item = app.state.store.add()
    client.get("/")
    client.post("/lifecycle/background")
    client.post("/lifecycle/active")

    client.get("/")  # page reload on becoming visible
    client.get("/open", params={"url": selection_link(item.uuid)})

    assert app.state.view.selected_item == item.uuid
