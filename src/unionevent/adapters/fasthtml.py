"""
FastHTML Adapter

Lets FastHTML FT components take part in UnionEvent registration.

An FT's own ``id`` attribute and ``data-tag`` attribute are its identifying
metadata. An FT wrapping exactly one FT child is treated as a decorating
wrapper, so metadata of the whole wrapper chain is collected, outermost
first.
"""

import logging
from typing import Any, Dict, Hashable, Iterable, Optional

from fastcore.xml import FT
from fasthtml.common import Script

from ..core.controller import DispatchController
from ..core.hooks import compose_observer, build_record
from ..core.identity import EventHandler, EventKind, Identifier
from ..core.lifecycle import AppPhase, LifecycleMonitor

logger = logging.getLogger(__name__)

TAG_ATTR = "data-tag"


def describe(ft: Any) -> Dict[str, Any]:
    """Turn an FT wrapper chain into the labeled tree the introspector walks."""
    if not isinstance(ft, FT):
        return {}
    attrs = ft.attrs or {}
    node: Dict[str, Any] = {
        "id": attrs.get("id"),
        "modifier": {"tag": attrs.get(TAG_ATTR)},
    }
    children = [c for c in ft.children if isinstance(c, FT)]
    if len(children) == 1 and len(ft.children) == 1:
        node["content"] = describe(children[0])
    return node


def on_compose_ft(ft: FT, action: EventHandler, *, controller: Optional[DispatchController] = None,
                  ids: Iterable[Identifier] = (), tags: Iterable[Hashable] = ()) -> FT:
    """Run ``action`` once while ``ft`` is composed."""
    record = build_record(describe(ft), EventKind.ON_COMPOSE, action, ids, tags)
    (controller or compose_observer).register_on_compose(record)
    return ft


def on_receive_ft(ft: FT, action: EventHandler, controller: DispatchController, *,
                  ids: Iterable[Identifier] = (), tags: Iterable[Hashable] = ()) -> FT:
    """
    Register ``action`` as the receiver for ``ft``'s identifiers.

    Example:
        on_receive_ft(Ul(*rows, id="#selectedIndex"), select, controller)
        controller.send("#selectedIndex", {"uuid": some_uuid})
    """
    record = build_record(describe(ft), EventKind.ON_RECEIVE, action, ids, tags)
    if not record.ids:
        logger.debug(f"{ft.tag} has no id; receiver cannot be addressed")
    controller.register_on_receive(record)
    return ft


def lifecycle_script(path: str = "/lifecycle") -> FT:
    """
    Report page visibility changes to the lifecycle route.

    Going to background drops every receiver, so the page reloads when it
    becomes visible again to compose them anew.
    """
    return Script(f"""
document.addEventListener('visibilitychange', () => {{
    const phase = document.visibilityState === 'hidden' ? 'background' : 'active';
    navigator.sendBeacon('{path}/' + phase);
    if (phase === 'active') location.reload();
}});
""")


def setup_lifecycle(app, monitor: LifecycleMonitor, path: str = "/lifecycle") -> None:
    """
    Feed host lifecycle signals into ``monitor``.

    Adds ``POST {path}/{phase}`` and clears registrations on shutdown.
    """
    async def lifecycle_handler(phase: str):
        try:
            app_phase = AppPhase(phase)
        except ValueError:
            logger.warning(f"Unknown lifecycle phase: {phase!r}")
            return {"phase": monitor.phase.value, "cleared": 0}
        cleared = monitor.transition(app_phase)
        return {"phase": app_phase.value, "cleared": cleared}

    app.post(f"{path}/{{phase}}")(lifecycle_handler)
    app.on_event("shutdown")(lambda: monitor.transition(AppPhase.BACKGROUND))
