"""
UnionEvent demo application

Run with ``python -m app.main``.
"""

from fasthtml.common import *

from unionevent import DispatchController, EventRegistry, LifecycleMonitor
from unionevent.adapters import lifecycle_script, setup_lifecycle
from unionevent.config import ApplicationConfig, configure_logging, get_config
from unionevent.persistence import ItemStore, MemoryItemStore

from .pages.items import ContentView
from .routes import add_routes


def create_app(config: ApplicationConfig = None, store: ItemStore = None):
    """
    Build the demo application.

    The registry is created once here and handed to everything that
    registers or sends; it is exposed on ``app.state`` with the rest of the
    wiring.
    """
    config = config or get_config()
    configure_logging(config.logging)

    registry = EventRegistry()  # Caches event registrations
    controller = DispatchController(registry)
    monitor = LifecycleMonitor(registry)
    store = store or MemoryItemStore()
    view = ContentView(store, controller, config.deeplink)

    app, rt = fast_app(
        title="UnionEvent demo",
        live=config.web.live,
        debug=config.web.debug,
        hdrs=(lifecycle_script(),),
    )

    add_routes(app, view, store, controller, config.deeplink)
    setup_lifecycle(app, monitor)

    app.state.config = config
    app.state.registry = registry
    app.state.controller = controller
    app.state.monitor = monitor
    app.state.store = store
    app.state.view = view
    return app


app = create_app()


if __name__ == "__main__":
    config = get_config()
    print("\n" + "=" * 60)
    print("🎉 UnionEvent Demo Application Starting!")
    print(f"   Deep links: {config.deeplink.bundle_id}:///Children?index=<uuid>")
    print(f"   Open one with: http://{config.web.host}:{config.web.port}/open?url=<link>")
    print("=" * 60)

    serve(appname="app.main", host=config.web.host, port=config.web.port, reload=config.web.debug)
