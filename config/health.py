"""Liveness probe for the dashboard process.

``db`` is always checked. ``socketio_redis`` is checked only when the Socket.IO
fan-out manager is configured (``SOCKETIO_REDIS_URL``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

import redis
from django.conf import settings
from django.db import connection
from django.http import JsonResponse

if TYPE_CHECKING:  # import for type checking only
    from collections.abc import Callable


def _probe(check: Callable[[], None]) -> dict[str, Any]:
    try:
        check()
    except Exception as exc:  # noqa: BLE001 - health must degrade, not crash
        return {"ok": False, "error": str(exc)}
    return {"ok": True}


def check_db() -> dict[str, Any]:
    def select_one():
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1;")
            cursor.fetchone()

    return _probe(select_one)


def check_redis(url: str) -> dict[str, Any]:
    client = redis.Redis.from_url(
        url,
        socket_timeout=0.5,
        socket_connect_timeout=0.5,
    )
    return _probe(client.ping)


def health(request):
    components = {"db": check_db()}
    redis_url = getattr(settings, "SOCKETIO_REDIS_URL", "")
    if redis_url:
        components["socketio_redis"] = check_redis(redis_url)

    passing = [c["ok"] for c in components.values()]
    if all(passing):
        status = "ok"
    elif any(passing):
        status = "degraded"
    else:
        status = "down"

    return JsonResponse(
        {
            "status": status,
            "components": components,
            "broadcast_mode": settings.DASHBOARD_BROADCAST_MODE,
        },
        status=200 if status == "ok" else 503,
    )
