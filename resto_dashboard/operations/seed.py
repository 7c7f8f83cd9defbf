"""Seed data for an empty dashboard.

The admin login is the only guard: once it exists nothing is recreated, even
if the sample shift or delivery were removed later.
"""

from __future__ import annotations

import logging
import time

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.db import connections
from django.db import transaction

from resto_dashboard.operations.models import Shift
from resto_dashboard.operations.registry import DELIVERIES
from resto_dashboard.operations.registry import SHIFTS
from resto_dashboard.operations.registry import USERS
from resto_dashboard.operations.store import RecordStore

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "123"  # noqa: S105

SEED_SHIFT = {
    "id": 1,
    "name": "Sarah Connor",
    "role": "Head Chef",
    "time": "10:00 - 18:00",
    "status": Shift.Status.ON_DUTY,
}
SEED_DELIVERY = {
    "id": 992,
    "label": "#ORD-992",
    "items": "2x Burgers",
    "address": "12 Main St",
    "status": "Cooking",
}


def wait_for_store(
    using: str = "default",
    *,
    attempts: int | None = None,
    delay: float | None = None,
) -> bool:
    """Return True once the database accepts a connection."""
    if attempts is None:
        attempts = settings.DASHBOARD_SEED_READY_ATTEMPTS
    if delay is None:
        delay = settings.DASHBOARD_SEED_READY_DELAY
    connection = connections[using]
    for attempt in range(1, max(attempts, 1) + 1):
        try:
            connection.ensure_connection()
        except DatabaseError as exc:
            logger.warning(
                "Database not ready (attempt %s/%s): %s", attempt, attempts, exc
            )
            if attempt < attempts:
                time.sleep(delay)
        else:
            return True
    return False


def seed_database(store: RecordStore | None = None) -> bool:
    """Create the admin login and sample records if no admin exists.

    Returns True when data was written.
    """
    store = store or RecordStore()
    if store.find_one(USERS, username=ADMIN_USERNAME) is not None:
        return False

    logger.info("Seeding database with admin user and sample records")
    with transaction.atomic(using=store.using):
        store.create_user(
            username=ADMIN_USERNAME,
            password=ADMIN_PASSWORD,
            role=store.model_for(USERS).Role.ADMIN,
        )
        store.create(SHIFTS, **SEED_SHIFT)
        store.create(DELIVERIES, **SEED_DELIVERY)
    return True


def seed_on_startup(store: RecordStore | None = None) -> bool:
    """Wait for the store, then seed. Failures are logged, never raised."""
    store = store or RecordStore()
    if not wait_for_store(store.using):
        logger.error("Seed skipped: database unavailable")
        return False
    try:
        return seed_database(store)
    except (DatabaseError, ValidationError) as exc:
        logger.error("Seed error (database might not be ready): %s", exc)  # noqa: TRY400
        return False
