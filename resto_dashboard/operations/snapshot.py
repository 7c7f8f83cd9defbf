from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

from resto_dashboard.operations.registry import CATEGORIES

if TYPE_CHECKING:  # import for type checking only
    from resto_dashboard.operations.store import RecordStore


def serialize_records(category_name: str, records) -> list[dict[str, Any]]:
    serializer_class = CATEGORIES[category_name].serializer_class
    return [dict(row) for row in serializer_class(records, many=True).data]


def assemble_snapshot(store: RecordStore) -> dict[str, list[dict[str, Any]]]:
    """Read every row of the four dashboard categories.

    Any store error propagates; callers never see a partial snapshot.
    """
    return {
        name: serialize_records(name, store.find_all(name)) for name in CATEGORIES
    }
