import pytest

from resto_dashboard.operations.seed import seed_database
from resto_dashboard.operations.services import DashboardService
from resto_dashboard.operations.store import RecordStore


@pytest.fixture
def store(db) -> RecordStore:
    return RecordStore()


@pytest.fixture
def service(store) -> DashboardService:
    return DashboardService(store)


@pytest.fixture
def seeded(store) -> RecordStore:
    seed_database(store)
    return store
