"""Global Socket.IO server for the dashboard frontend.

Frontend convention:
- URL base: ws://<host>:3000
- Socket.IO path: /socket.io/ (``SOCKETIO_PATH``)
- No auth on the socket; login happens over ``POST /api/login``.

Every client gets an `init` snapshot on connect. Mutation events
(`addWorker`, `updateEntry`, `workerToggleStatus`) are applied and then
broadcast to all clients. Failures are logged here and never sent back.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

import socketio
from channels.db import database_sync_to_async
from django.conf import settings
from django.core.exceptions import ValidationError

from resto_dashboard.operations.services import DashboardService
from resto_dashboard.operations.store import RecordStore
from resto_dashboard.realtime.events.dashboard import publish_change
from resto_dashboard.realtime.events.dashboard import publish_snapshot

if TYPE_CHECKING:  # import for type checking only
    from collections.abc import Callable

    from resto_dashboard.operations.services import Change

logger = logging.getLogger(__name__)


def _cors_allowed_origins() -> str | list[str]:
    value = getattr(settings, "SOCKETIO_CORS_ALLOWED_ORIGINS", "*")
    if value == "*":
        return value
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def _client_manager() -> socketio.AsyncManager | None:
    url = getattr(settings, "SOCKETIO_REDIS_URL", "")
    if not url:
        return None
    return socketio.AsyncRedisManager(url)


sio = socketio.AsyncServer(
    async_mode="asgi",
    cors_allowed_origins=_cors_allowed_origins(),
    client_manager=_client_manager(),
    logger=False,
    engineio_logger=False,
)

store = RecordStore()
service = DashboardService(store)


def _payload(data: Any) -> dict[str, Any]:
    return data if isinstance(data, dict) else {}


@sio.event
async def connect(sid: str, environ: dict[str, Any], auth: Any | None = None):
    logger.info("User connected: %s", sid)
    try:
        await publish_snapshot(sio, store, to=sid)
    except Exception:  # noqa: BLE001 - a client without a snapshot waits for the next broadcast
        logger.warning("Database not ready yet for new connection %s", sid)


@sio.event
async def disconnect(sid: str, *args: Any):
    logger.info("User disconnected: %s", sid)


async def _apply(label: str, mutation: Callable[..., Change | None], *args: Any):
    """Run a mutation off the event loop, then broadcast what it changed."""

    try:
        change = await database_sync_to_async(mutation)(*args)
    except ValidationError as exc:
        logger.warning("%s rejected: %s", label, "; ".join(exc.messages))
        return
    except Exception:  # noqa: BLE001 - socket errors are logged, never relayed
        logger.exception("%s failed", label)
        return
    if change is None:
        return
    try:
        await publish_change(sio, store, change)
    except Exception:  # noqa: BLE001 - clients catch up on the next broadcast
        logger.exception("Broadcast after %s failed", label)


@sio.on("addWorker")
async def add_worker(sid: str, data: Any = None):
    payload = _payload(data)
    await _apply(
        "addWorker",
        service.add_worker,
        payload.get("name"),
        payload.get("role"),
        payload.get("time"),
    )


@sio.on("updateEntry")
async def update_entry(sid: str, data: Any = None):
    payload = _payload(data)
    await _apply(
        "updateEntry",
        service.update_entry,
        payload.get("category"),
        payload.get("id"),
        payload.get("field"),
        payload.get("value"),
    )


@sio.on("workerToggleStatus")
async def worker_toggle_status(sid: str, data: Any = None):
    payload = _payload(data)
    await _apply("workerToggleStatus", service.toggle_worker_status, payload.get("name"))
