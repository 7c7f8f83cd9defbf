"""Mutation handlers behind the dashboard's realtime events.

Each handler writes through the RecordStore it was built with and returns a
`Change` describing the write, or None when there is nothing to broadcast.
Handlers are synchronous ORM code; the realtime layer runs them off the event
loop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import field
from typing import Any

from django.conf import settings

from resto_dashboard.operations.models import Shift
from resto_dashboard.operations.registry import SHIFTS
from resto_dashboard.operations.registry import USERS
from resto_dashboard.operations.registry import get_category
from resto_dashboard.operations.snapshot import serialize_records
from resto_dashboard.operations.store import RecordStore
from resto_dashboard.operations.store import coerce_identifier
from resto_dashboard.operations.store import coerce_value

logger = logging.getLogger(__name__)

STATUS_TOGGLE = {
    Shift.Status.ON_DUTY: Shift.Status.OFF_DUTY,
    Shift.Status.OFF_DUTY: Shift.Status.ON_DUTY,
}


@dataclass(frozen=True)
class Change:
    category: str
    id: int | None
    fields: dict[str, Any] = field(default_factory=dict)
    # Rows the write matched; 0 for an update aimed at a missing record.
    matched: int = 1

    def as_payload(self) -> dict[str, Any]:
        return {"category": self.category, "id": self.id, "fields": self.fields}


class DashboardService:
    def __init__(self, store: RecordStore | None = None) -> None:
        self.store = store or RecordStore()

    def add_worker(self, name: Any, role: Any, time: Any) -> Change:
        """Create a worker login and its shift.

        The two inserts are independent: a failed user insert (duplicate or
        blank name) raises before the shift is written; a failed shift insert
        leaves the user behind.
        """
        user = self.store.create_user(
            username=_as_text(name),
            password=settings.DASHBOARD_DEFAULT_WORKER_PASSWORD,
            role=self.store.model_for(USERS).Role.WORKER,
        )
        shift = self.store.create(
            SHIFTS,
            name=user.username,
            role=_as_text(role),
            time=_as_text(time),
            status=Shift.Status.SCHEDULED,
            worker=user,
        )
        logger.info("Added worker %s with shift %s", user.username, shift.pk)
        fields = serialize_records(SHIFTS, [shift])[0]
        return Change(category=SHIFTS, id=shift.pk, fields=fields)

    def update_entry(
        self,
        category: Any,
        identifier: Any,
        field_name: Any,
        value: Any,
    ) -> Change | None:
        """Set one field on one record of a dashboard category.

        Unknown categories are ignored. Unknown fields raise ValidationError.
        A missing record still yields a Change with ``matched == 0``.
        """
        resolved = get_category(category)
        if resolved is None:
            logger.debug("Ignoring update for unknown category %r", category)
            return None
        attr = resolved.resolve_field(field_name)
        value = coerce_value(resolved.model._meta.get_field(attr), value)  # noqa: SLF001
        record_id = coerce_identifier(identifier)
        matched = 0
        if record_id is not None:
            matched = self.store.update(resolved.name, record_id, {attr: value})
        if not matched:
            logger.debug("No %s record with id %r", resolved.name, identifier)
        return Change(
            category=resolved.name,
            id=record_id,
            fields={field_name: value},
            matched=matched,
        )

    def find_worker_shift(self, name: Any) -> Shift | None:
        """The shift linked to the user called ``name``, else the first by name."""
        if not isinstance(name, str) or not name:
            return None
        shift = self.store.find_one(SHIFTS, worker__username=name)
        if shift is None:
            shift = self.store.find_one(SHIFTS, name=name)
        return shift

    def toggle_worker_status(self, name: Any) -> Change | None:
        """Flip a worker's shift between On Duty and Off Duty.

        Other statuses (e.g. Scheduled) are left as they are.
        """
        shift = self.find_worker_shift(name)
        if shift is None:
            logger.debug("No shift found for worker %r", name)
            return None
        new_status = STATUS_TOGGLE.get(shift.status)
        if new_status is None:
            logger.info(
                "Shift %s has status %r; toggle only flips On Duty/Off Duty",
                shift.pk,
                shift.status,
            )
            return None
        shift.status = new_status
        self.store.save(shift, fields=["status"])
        return Change(category=SHIFTS, id=shift.pk, fields={"status": str(new_status)})


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()
