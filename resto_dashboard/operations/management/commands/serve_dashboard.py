from __future__ import annotations

import uvicorn
from django.conf import settings
from django.core.management.base import BaseCommand
from django.core.management.base import CommandParser


class Command(BaseCommand):
    help = "Serve the HTTP API and Socket.IO channel with uvicorn"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--host", default="0.0.0.0")  # noqa: S104
        parser.add_argument("--port", type=int, default=settings.DASHBOARD_PORT)
        parser.add_argument("--reload", action="store_true")

    def handle(self, *args, **options) -> None:
        self.stdout.write(
            f"Server running on http://localhost:{options['port']}",
        )
        # Logging is configured by Django's LOGGING setting.
        uvicorn.run(
            "config.asgi:application",
            host=options["host"],
            port=options["port"],
            reload=options["reload"],
            log_config=None,
        )
