from __future__ import annotations

from typing import TYPE_CHECKING

from channels.db import database_sync_to_async
from django.conf import settings

from resto_dashboard.operations.snapshot import assemble_snapshot

if TYPE_CHECKING:  # import for type checking only
    import socketio

    from resto_dashboard.operations.services import Change
    from resto_dashboard.operations.store import RecordStore

INIT_EVENT = "init"
CHANGE_EVENT = "entryChanged"

BROADCAST_SNAPSHOT = "snapshot"
BROADCAST_INCREMENTAL = "incremental"


async def publish_snapshot(
    sio: socketio.AsyncServer,
    store: RecordStore,
    to: str | None = None,
) -> None:
    """Send the full dashboard to one client (``to``) or to everyone."""

    payload = await database_sync_to_async(assemble_snapshot)(store)
    await sio.emit(INIT_EVENT, payload, to=to)


async def publish_change(
    sio: socketio.AsyncServer,
    store: RecordStore,
    change: Change,
) -> None:
    """Broadcast a mutation according to ``DASHBOARD_BROADCAST_MODE``."""

    mode = getattr(settings, "DASHBOARD_BROADCAST_MODE", BROADCAST_SNAPSHOT)
    if mode == BROADCAST_INCREMENTAL:
        # Nothing was written, so every client is already current.
        if change.matched:
            await sio.emit(CHANGE_EVENT, change.as_payload())
        return
    await publish_snapshot(sio, store)
