"""Dashboard categories and the fields the dashboard may edit on each.

The four categories are the keys of the `init` snapshot and the values a
client may send as `updateEntry.category`. Field names are the wire names the
frontend uses; each maps to the model attribute it writes.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError

from resto_dashboard.operations.api.serializers import AppointmentSerializer
from resto_dashboard.operations.api.serializers import DeliverySerializer
from resto_dashboard.operations.api.serializers import ShiftSerializer
from resto_dashboard.operations.api.serializers import TrainingSerializer
from resto_dashboard.operations.models import Appointment
from resto_dashboard.operations.models import Delivery
from resto_dashboard.operations.models import Shift
from resto_dashboard.operations.models import Training

if TYPE_CHECKING:  # import for type checking only
    from collections.abc import Mapping

    from django.db import models
    from rest_framework import serializers

SHIFTS = "shifts"
DELIVERIES = "deliveries"
TRAINING = "training"
APPOINTMENTS = "appointments"
USERS = "users"


@dataclass(frozen=True)
class Category:
    name: str
    model: type[models.Model]
    serializer_class: type[serializers.ModelSerializer]
    editable_fields: Mapping[str, str]

    def resolve_field(self, field: str) -> str:
        """Return the model attribute behind a wire field name.

        Raises ValidationError for fields the dashboard may not write.
        """
        try:
            return self.editable_fields[field]
        except (KeyError, TypeError):
            msg = f"'{field}' is not an editable field of {self.name}"
            raise ValidationError(msg, code="unknown_field") from None


CATEGORIES: Mapping[str, Category] = MappingProxyType(
    {
        SHIFTS: Category(
            name=SHIFTS,
            model=Shift,
            serializer_class=ShiftSerializer,
            editable_fields=MappingProxyType(
                {"name": "name", "role": "role", "time": "time", "status": "status"}
            ),
        ),
        DELIVERIES: Category(
            name=DELIVERIES,
            model=Delivery,
            serializer_class=DeliverySerializer,
            editable_fields=MappingProxyType(
                {
                    "label": "label",
                    "items": "items",
                    "address": "address",
                    "status": "status",
                }
            ),
        ),
        TRAINING: Category(
            name=TRAINING,
            model=Training,
            serializer_class=TrainingSerializer,
            editable_fields=MappingProxyType(
                {
                    "topic": "topic",
                    "trainer": "trainer",
                    "time": "time",
                    "attendees": "attendees",
                }
            ),
        ),
        APPOINTMENTS: Category(
            name=APPOINTMENTS,
            model=Appointment,
            serializer_class=AppointmentSerializer,
            editable_fields=MappingProxyType(
                {
                    "with": "with_name",
                    "purpose": "purpose",
                    "time": "time",
                    "location": "location",
                }
            ),
        ),
    }
)


def get_category(name: object) -> Category | None:
    if not isinstance(name, str):
        return None
    return CATEGORIES.get(name)


def model_for_kind(kind: str) -> type[models.Model]:
    """Resolve an entity kind (a category name or ``users``) to its model."""
    if kind == USERS:
        return get_user_model()
    category = get_category(kind)
    if category is None:
        msg = f"Unknown entity kind: {kind}"
        raise LookupError(msg)
    return category.model
