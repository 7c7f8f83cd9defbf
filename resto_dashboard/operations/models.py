import threading
import time

from django.conf import settings
from django.db import models

_id_lock = threading.Lock()
_last_record_id = 0


def generate_record_id() -> int:
    """Millisecond-timestamp identifier, strictly increasing within the process."""
    global _last_record_id  # noqa: PLW0603
    with _id_lock:
        candidate = int(time.time() * 1000)
        _last_record_id = max(candidate, _last_record_id + 1)
        return _last_record_id


class Shift(models.Model):
    """A worker's duty slot on the dashboard.

    `worker` links the shift to the login created alongside it. Seeded and
    admin-entered shifts may have no linked user, in which case `name` is the
    only way to find them.
    """

    class Status(models.TextChoices):
        SCHEDULED = "Scheduled", "Scheduled"
        ON_DUTY = "On Duty", "On Duty"
        OFF_DUTY = "Off Duty", "Off Duty"

    id = models.BigIntegerField(primary_key=True, default=generate_record_id)
    name = models.CharField(max_length=255)
    role = models.CharField(max_length=255, blank=True)
    time = models.CharField(max_length=255, blank=True)
    # Free text: admins may type any status from the dashboard.
    status = models.CharField(max_length=64, default=Status.SCHEDULED)
    worker = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="shifts",
    )

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"Shift({self.name} {self.time} {self.status})"


class Delivery(models.Model):
    id = models.BigIntegerField(primary_key=True, default=generate_record_id)
    label = models.CharField(max_length=255)
    items = models.TextField(blank=True)
    address = models.CharField(max_length=255, blank=True)
    status = models.CharField(max_length=64, blank=True)

    class Meta:
        ordering = ["id"]
        verbose_name_plural = "deliveries"

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"Delivery({self.label})"


class Training(models.Model):
    id = models.BigIntegerField(primary_key=True, default=generate_record_id)
    topic = models.CharField(max_length=255)
    trainer = models.CharField(max_length=255, blank=True)
    time = models.CharField(max_length=255, blank=True)
    attendees = models.IntegerField(default=0)

    class Meta:
        ordering = ["id"]
        verbose_name_plural = "training sessions"

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"Training({self.topic})"


class Appointment(models.Model):
    id = models.BigIntegerField(primary_key=True, default=generate_record_id)
    # `with` is reserved in Python; the column and wire name keep it.
    with_name = models.CharField(max_length=255, db_column="with")
    purpose = models.CharField(max_length=255, blank=True)
    time = models.CharField(max_length=255, blank=True)
    location = models.CharField(max_length=255, blank=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"Appointment({self.with_name} @ {self.time})"
