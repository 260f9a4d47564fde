"""
Item list page

The list of items, each with a deep link that reopens the app with that
item selected. The list container is the receiver for the selection sent
by the deep-link handler.
"""

from fasthtml.common import *

import logging
from typing import Optional
from uuid import UUID

from unionevent import DispatchController, EventRecord, ZERO_UUID, build_url
from unionevent.adapters import on_receive_ft
from unionevent.config import DeepLinkConfig
from unionevent.persistence import Item, ItemStore

logger = logging.getLogger(__name__)

SELECTED_COLOR = "#f87171"
UNSELECTED_COLOR = "#fde68a"


def format_timestamp(item: Item) -> str:
    return item.timestamp.strftime("%x %X")


class ContentView:
    """State and components of the item list."""

    def __init__(self, store: ItemStore, controller: DispatchController, deeplink: DeepLinkConfig):
        self.store = store
        self.controller = controller
        self.deeplink = deeplink
        self.selected_item: Optional[UUID] = None  # Address ID of the selected row

    def item_url(self, uuid: Optional[UUID]) -> str:
        """Deep link that selects ``uuid`` when opened."""
        if uuid is None:
            return ""
        return build_url(self.deeplink.bundle_id, self.deeplink.path, {self.deeplink.query_key: str(uuid)})

    def receive_selection(self, event: EventRecord) -> None:
        selected = event.get_uuid(self.deeplink.payload_key)
        if event.last_id is None or selected is None:
            return
        logger.info(f"{event.last_id} received value {selected}")
        self.selected_item = selected

    def row(self, item: Item):
        is_selected = (self.selected_item or ZERO_UUID) == item.uuid
        return Li(
            A(format_timestamp(item), href=f"/items/{item.uuid}"),
            Form(Button("Delete", type="submit"), method="post", action=f"/items/{item.uuid}/delete", style="display:inline"),
            cls="selected" if is_selected else "",
            style=f"background:{SELECTED_COLOR if is_selected else UNSELECTED_COLOR}",
        )

    def item_list(self):
        rows = [self.row(item) for item in self.store.list_items()]
        # Registered on the list, not per row, so there is one receiver
        return on_receive_ft(Ul(*rows, id=self.deeplink.selection_target), self.receive_selection, self.controller)

    def page(self):
        return Titled(
            "Items",
            Form(Button("Add Item", type="submit"), method="post", action="/items"),
            self.item_list(),
            P("Select an item") if self.selected_item is None else P(f"Selected: {self.selected_item}"),
        )

    def detail(self, item: Item):
        url = self.item_url(item.uuid)
        return Titled(
            f"Item at {format_timestamp(item)}",
            Div(
                P("URL Link:"),
                Hr(),
                P(Em(url), id="item-url"),
                Hr(),
                Button("Copy", onclick=f"navigator.clipboard.writeText('{url}')"),
                style=f"background:{item.css_color}",
            ),
            A("Back", href="/"),
        )
