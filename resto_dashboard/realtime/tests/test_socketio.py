import asyncio
from unittest import mock

import pytest
from asgiref.sync import async_to_sync
from django.db import OperationalError

from resto_dashboard.operations.models import Delivery
from resto_dashboard.operations.models import Shift
from resto_dashboard.operations.seed import seed_database
from resto_dashboard.realtime import socketio as realtime

pytestmark = pytest.mark.django_db(transaction=True)


@pytest.fixture
def emit():
    with mock.patch.object(realtime.sio, "emit", new_callable=mock.AsyncMock) as m:
        yield m


@pytest.fixture
def seeded_db(db):
    seed_database(realtime.store)


def _snapshots(emit):
    return [c.args[1] for c in emit.await_args_list if c.args[0] == "init"]


class TestConnect:
    def test_sends_snapshot_to_new_client_only(self, seeded_db, emit):
        async_to_sync(realtime.connect)("sid-1", {})

        emit.assert_awaited_once()
        event, payload = emit.await_args.args
        assert event == "init"
        assert emit.await_args.kwargs == {"to": "sid-1"}
        assert [s["name"] for s in payload["shifts"]] == ["Sarah Connor"]
        assert [d["label"] for d in payload["deliveries"]] == ["#ORD-992"]
        assert payload["training"] == []
        assert payload["appointments"] == []

    def test_store_failure_is_logged_not_raised(self, db, emit, caplog):
        with mock.patch(
            "resto_dashboard.realtime.events.dashboard.assemble_snapshot",
            side_effect=OperationalError("database is locked"),
        ):
            async_to_sync(realtime.connect)("sid-2", {})

        emit.assert_not_awaited()
        assert "Database not ready yet" in caplog.text


class TestAddWorker:
    def test_broadcasts_full_snapshot(self, seeded_db, emit):
        async_to_sync(realtime.add_worker)(
            "sid-1", {"name": "Kyle Reese", "role": "Line Cook", "time": "08:00 - 16:00"}
        )

        emit.assert_awaited_once()
        assert emit.await_args.args[0] == "init"
        assert emit.await_args.kwargs == {"to": None}
        names = [s["name"] for s in emit.await_args.args[1]["shifts"]]
        assert names == ["Sarah Connor", "Kyle Reese"]

    def test_duplicate_worker_is_not_broadcast(self, seeded_db, emit, caplog):
        async_to_sync(realtime.add_worker)(
            "sid-1", {"name": "admin", "role": "Chef", "time": ""}
        )

        emit.assert_not_awaited()
        assert "addWorker rejected" in caplog.text
        assert not Shift.objects.filter(name="admin").exists()


class TestUpdateEntry:
    def test_applies_and_broadcasts(self, seeded_db, emit):
        async_to_sync(realtime.update_entry)(
            "sid-1",
            {"category": "deliveries", "id": "992", "field": "status", "value": "Ready"},
        )

        assert Delivery.objects.get(pk=992).status == "Ready"
        (snapshot,) = _snapshots(emit)
        assert snapshot["deliveries"][0]["status"] == "Ready"

    def test_unknown_category_is_ignored(self, seeded_db, emit):
        async_to_sync(realtime.update_entry)(
            "sid-1", {"category": "inventory", "id": 1, "field": "name", "value": "x"}
        )
        emit.assert_not_awaited()

    def test_unknown_field_is_rejected(self, seeded_db, emit, caplog):
        async_to_sync(realtime.update_entry)(
            "sid-1", {"category": "shifts", "id": 1, "field": "salary", "value": "1"}
        )
        emit.assert_not_awaited()
        assert "updateEntry rejected" in caplog.text

    def test_missing_record_still_broadcasts_snapshot(self, seeded_db, emit):
        async_to_sync(realtime.update_entry)(
            "sid-1", {"category": "shifts", "id": 404, "field": "name", "value": "x"}
        )
        assert len(_snapshots(emit)) == 1

    def test_null_value_clears_text_field(self, seeded_db, emit, caplog):
        async_to_sync(realtime.update_entry)(
            "sid-1", {"category": "shifts", "id": 1, "field": "role", "value": None}
        )

        assert Shift.objects.get(pk=1).role == ""
        (snapshot,) = _snapshots(emit)
        assert snapshot["shifts"][0]["role"] == ""
        assert "updateEntry failed" not in caplog.text

    def test_non_object_payload_is_ignored(self, seeded_db, emit):
        async_to_sync(realtime.update_entry)("sid-1", "not-a-dict")
        emit.assert_not_awaited()

    def test_concurrent_updates_end_consistent(self, seeded_db, emit):
        async def both():
            await asyncio.gather(
                realtime.update_entry(
                    "a", {"category": "shifts", "id": 1, "field": "role", "value": "Sous Chef"}
                ),
                realtime.update_entry(
                    "b", {"category": "shifts", "id": 1, "field": "role", "value": "Expo"}
                ),
            )

        async_to_sync(both)()

        final = Shift.objects.get(pk=1).role
        assert final in {"Sous Chef", "Expo"}
        snapshots = _snapshots(emit)
        assert len(snapshots) == 2
        assert snapshots[-1]["shifts"][0]["role"] == final


class TestWorkerToggleStatus:
    def test_toggles_and_broadcasts(self, seeded_db, emit):
        async_to_sync(realtime.worker_toggle_status)("sid-1", {"name": "Sarah Connor"})

        assert Shift.objects.get(pk=1).status == "Off Duty"
        (snapshot,) = _snapshots(emit)
        assert snapshot["shifts"][0]["status"] == "Off Duty"

    def test_unknown_worker_is_silent(self, seeded_db, emit):
        async_to_sync(realtime.worker_toggle_status)("sid-1", {"name": "Nobody"})
        emit.assert_not_awaited()


class TestIncrementalBroadcast:
    @pytest.fixture(autouse=True)
    def _incremental(self, settings):
        settings.DASHBOARD_BROADCAST_MODE = "incremental"

    def test_update_emits_entry_changed(self, seeded_db, emit):
        async_to_sync(realtime.update_entry)(
            "sid-1", {"category": "shifts", "id": 1, "field": "time", "value": "09:00"}
        )

        emit.assert_awaited_once_with(
            "entryChanged",
            {"category": "shifts", "id": 1, "fields": {"time": "09:00"}},
        )

    def test_missing_record_emits_nothing(self, seeded_db, emit):
        async_to_sync(realtime.update_entry)(
            "sid-1", {"category": "shifts", "id": 404, "field": "time", "value": "09:00"}
        )
        emit.assert_not_awaited()


def test_mutation_error_is_logged_not_raised(seeded_db, emit, caplog):
    with mock.patch.object(
        realtime.service,
        "toggle_worker_status",
        side_effect=OperationalError("disk I/O error"),
    ):
        async_to_sync(realtime.worker_toggle_status)("sid-1", {"name": "Sarah Connor"})

    emit.assert_not_awaited()
    assert "workerToggleStatus failed" in caplog.text
