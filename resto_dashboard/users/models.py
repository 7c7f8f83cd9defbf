from django.contrib.auth.models import AbstractUser
from django.db import models
from django.db.models import CharField
from django.utils.translation import gettext_lazy as _


class User(AbstractUser):
    """
    Default custom user model for resto_dashboard.

    Workers are added from the dashboard by display name, and that name is
    their login, so the username accepts spaces and any other characters.
    """

    class Role(models.TextChoices):
        ADMIN = "admin", _("Admin")
        WORKER = "worker", _("Worker")

    username = CharField(
        _("username"),
        max_length=150,
        unique=True,
        error_messages={"unique": _("A user with that username already exists.")},
    )
    role = CharField(
        _("Role"),
        max_length=16,
        choices=Role.choices,
        default=Role.WORKER,
    )
    # Audit timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.username} ({self.role})"
