"""Record Store: table-style access to the five entity kinds.

Handlers never touch model managers directly; they are given a RecordStore
bound to one database alias, so tests and alternate deployments can point the
whole dashboard at another connection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

from django.core.exceptions import ValidationError
from django.db import DEFAULT_DB_ALIAS

from resto_dashboard.operations.registry import USERS
from resto_dashboard.operations.registry import model_for_kind

if TYPE_CHECKING:  # import for type checking only
    from collections.abc import Mapping

    from django.db import models

    from resto_dashboard.users.models import User


class RecordStore:
    def __init__(self, using: str = DEFAULT_DB_ALIAS) -> None:
        self.using = using

    def model_for(self, kind: str) -> type[models.Model]:
        return model_for_kind(kind)

    def _manager(self, kind: str):
        return self.model_for(kind)._default_manager.using(self.using)  # noqa: SLF001

    def create(self, kind: str, **fields: Any) -> models.Model:
        """Validate and insert one record.

        Raises ValidationError when required fields are missing or a unique
        constraint would be violated.
        """
        if kind == USERS:
            msg = "Use create_user() so the password is hashed"
            raise ValueError(msg)
        instance = self.model_for(kind)(**fields)
        instance.full_clean()
        instance.save(using=self.using, force_insert=True)
        return instance

    def create_user(self, username: str, password: str, role: str) -> User:
        user_model = self.model_for(USERS)
        user = user_model(username=username, role=role)
        user.set_password(password)
        user.full_clean()
        user.save(using=self.using, force_insert=True)
        return user

    def find_one(self, kind: str, **lookup: Any) -> models.Model | None:
        return self._manager(kind).filter(**lookup).order_by("pk").first()

    def find_all(self, kind: str) -> list[models.Model]:
        return list(self._manager(kind).order_by("pk"))

    def update(self, kind: str, identifier: Any, changes: Mapping[str, Any]) -> int:
        """Write ``changes`` to the record with primary key ``identifier``.

        Values are coerced by their model field. Returns the number of rows
        matched; no match is not an error.
        """
        model = self.model_for(kind)
        coerced = {}
        for attr, value in changes.items():
            field = model._meta.get_field(attr)  # noqa: SLF001
            coerced[field.attname] = coerce_value(field, value)
        if not coerced:
            return 0
        return self._manager(kind).filter(pk=identifier).update(**coerced)

    def save(self, instance: models.Model, fields: list[str]) -> None:
        instance.save(using=self.using, update_fields=fields)


def coerce_identifier(value: Any) -> int | None:
    """Integer identifier from client input; None when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def coerce_value(field: models.Field, value: Any) -> Any:
    """Convert client input for ``field``; null clears text columns."""
    if value is None and not field.null:
        if field.empty_strings_allowed:
            return ""
        raise ValidationError(
            "%(field)s cannot be null.",
            code="null_value",
            params={"field": field.name},
        )
    return field.to_python(value)
