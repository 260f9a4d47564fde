"""
Demo application routes

Item CRUD, item detail with its deep link, and the deep-link entry point.
"""

from fasthtml.common import *

import logging
from uuid import UUID

from unionevent import DeepLinkError, DispatchController, parse_url
from unionevent.config import DeepLinkConfig
from unionevent.persistence import ItemStore

from .pages.items import ContentView

logger = logging.getLogger(__name__)


def _parse_uuid(text: str):
    try:
        return UUID(text)
    except (TypeError, ValueError):
        return None


def handle_deeplink(url: str, controller: DispatchController, config: DeepLinkConfig) -> bool:
    """
    Process an external deep link and tell the item list about the selection.

    Only ``{bundle_id}:///Children?index=<uuid>`` links are acted on; anything
    else is ignored.

    Returns:
        True if the selection was delivered to a receiver
    """
    try:
        link = parse_url(url)
    except DeepLinkError as e:
        logger.info(f"Ignoring link: {e}")
        return False

    if not link.matches(config.bundle_id, config.path):
        logger.info(f"Ignoring link for {link.scheme}:{'/'.join(link.path[1:])}")
        return False

    uuid = _parse_uuid(link.query.get(config.query_key))
    if uuid is None:
        logger.info(f"Ignoring link without a valid {config.query_key!r}")
        return False

    return controller.send(config.selection_target, {config.payload_key: uuid})


def add_routes(app, view: ContentView, store: ItemStore, controller: DispatchController, config: DeepLinkConfig) -> None:
    """Register the demo routes on ``app``."""

    @app.get("/")
    def index():
        return view.page()

    @app.post("/items")
    def add_item():
        item = store.add()
        logger.info(f"Added item {item.uuid}")
        return Redirect("/")

    @app.get("/items/{item_id}")
    def item_detail(item_id: str):
        uuid = _parse_uuid(item_id)
        item = store.get(uuid) if uuid else None
        if item is None:
            return Titled("Not found", P(f"No item {item_id}"), A("Back", href="/"))
        return view.detail(item)

    @app.post("/items/{item_id}/delete")
    def delete_item(item_id: str):
        uuid = _parse_uuid(item_id)
        if uuid is not None and store.delete(uuid) and view.selected_item == uuid:
            view.selected_item = None
        return Redirect("/")

    @app.get("/open")
    def open_url(url: str):
        handle_deeplink(url, controller, config)
        return Redirect("/")
