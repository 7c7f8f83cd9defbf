from unittest import mock

import pytest
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db import IntegrityError

from resto_dashboard.operations.models import Appointment
from resto_dashboard.operations.models import Delivery
from resto_dashboard.operations.models import Shift
from resto_dashboard.operations.models import Training
from resto_dashboard.operations.snapshot import assemble_snapshot

pytestmark = pytest.mark.django_db
User = get_user_model()


class TestAddWorker:
    def test_creates_user_and_scheduled_shift(self, service, store):
        change = service.add_worker("John Connor", "Dishwasher", "12:00 - 20:00")

        user = User.objects.get(username="John Connor")
        assert user.role == "worker"
        assert user.check_password("123")
        shift = Shift.objects.get(name="John Connor")
        assert shift.status == "Scheduled"
        assert shift.role == "Dishwasher"
        assert shift.time == "12:00 - 20:00"
        assert shift.worker == user

        assert change.category == "shifts"
        assert change.id == shift.pk
        assert change.fields["name"] == "John Connor"

        names = [row["name"] for row in assemble_snapshot(store)["shifts"]]
        assert "John Connor" in names

    def test_uses_configured_default_password(self, service, settings):
        settings.DASHBOARD_DEFAULT_WORKER_PASSWORD = "changeme"  # noqa: S105
        service.add_worker("Miles Dyson", "Prep", "6-2")
        assert User.objects.get(username="Miles Dyson").check_password("changeme")

    def test_duplicate_username_aborts_before_shift(self, service):
        service.add_worker("Kyle", "Cook", "9-5")
        with pytest.raises(ValidationError):
            service.add_worker("Kyle", "Cook", "10-6")
        assert User.objects.filter(username="Kyle").count() == 1
        assert Shift.objects.filter(name="Kyle").count() == 1

    def test_blank_name_is_rejected(self, service):
        with pytest.raises(ValidationError):
            service.add_worker("", "Cook", "9-5")
        assert not Shift.objects.exists()

    def test_failed_shift_leaves_user_behind(self, service, store):
        real_create = store.create

        def failing_create(kind, **fields):
            if kind == "shifts":
                msg = "disk full"
                raise IntegrityError(msg)
            return real_create(kind, **fields)

        with (
            mock.patch.object(store, "create", side_effect=failing_create),
            pytest.raises(IntegrityError),
        ):
            service.add_worker("Orphan", "Cook", "9-5")
        assert User.objects.filter(username="Orphan").exists()
        assert not Shift.objects.exists()


class TestUpdateEntry:
    @pytest.fixture(autouse=True)
    def _records(self, store):
        store.create("shifts", id=1, name="Sarah Connor", status="On Duty")
        store.create("deliveries", id=992, label="#ORD-992", status="Cooking")
        store.create("training", id=7, topic="Allergens", attendees=3)
        store.create("appointments", id=8, with_name="Supplier", purpose="Order")

    def test_sets_one_field(self, service):
        change = service.update_entry("deliveries", "992", "status", "Delivered")
        assert Delivery.objects.get(pk=992).status == "Delivered"
        assert change.matched == 1
        assert change.as_payload() == {
            "category": "deliveries",
            "id": 992,
            "fields": {"status": "Delivered"},
        }

    def test_with_field_maps_to_column(self, service):
        service.update_entry("appointments", 8, "with", "Health Inspector")
        assert Appointment.objects.get(pk=8).with_name == "Health Inspector"

    def test_attendees_coerced_to_integer(self, service):
        change = service.update_entry("training", 7, "attendees", "15")
        assert Training.objects.get(pk=7).attendees == 15
        assert change.fields == {"attendees": 15}

    def test_status_accepts_arbitrary_text(self, service):
        service.update_entry("shifts", 1, "status", "On Break")
        assert Shift.objects.get(pk=1).status == "On Break"

    def test_null_clears_text_field(self, service):
        change = service.update_entry("shifts", 1, "role", None)
        assert Shift.objects.get(pk=1).role == ""
        assert change.matched == 1
        assert change.fields == {"role": ""}

    def test_null_integer_is_rejected(self, service):
        with pytest.raises(ValidationError) as excinfo:
            service.update_entry("training", 7, "attendees", None)
        assert excinfo.value.error_list[0].code == "null_value"
        assert Training.objects.get(pk=7).attendees == 3

    def test_float_id_matches_record(self, service):
        change = service.update_entry("shifts", 1.0, "role", "Expo")
        assert change.id == 1
        assert change.matched == 1
        assert Shift.objects.get(pk=1).role == "Expo"

    def test_unknown_category_is_ignored(self, service, store):
        before = assemble_snapshot(store)
        assert service.update_entry("menus", 1, "status", "x") is None
        assert assemble_snapshot(store) == before

    def test_unknown_field_is_rejected(self, service, store):
        before = assemble_snapshot(store)
        with pytest.raises(ValidationError):
            service.update_entry("shifts", 1, "password", "hunter2")
        assert assemble_snapshot(store) == before

    def test_missing_record_still_reports_change(self, service):
        change = service.update_entry("shifts", 999, "status", "Off Duty")
        assert change is not None
        assert change.matched == 0
        assert Shift.objects.get(pk=1).status == "On Duty"

    def test_non_numeric_id_matches_nothing(self, service):
        change = service.update_entry("shifts", "abc", "status", "Off Duty")
        assert change.matched == 0
        assert change.id is None
        assert Shift.objects.get(pk=1).status == "On Duty"


class TestToggleWorkerStatus:
    def test_flips_on_and_off_duty(self, service, store):
        store.create("shifts", id=1, name="Sarah Connor", status="On Duty")

        change = service.toggle_worker_status("Sarah Connor")
        assert Shift.objects.get(pk=1).status == "Off Duty"
        assert change.fields == {"status": "Off Duty"}

        service.toggle_worker_status("Sarah Connor")
        assert Shift.objects.get(pk=1).status == "On Duty"

    def test_other_status_left_unchanged(self, service, store):
        store.create("shifts", id=1, name="New Hire", status="Scheduled")
        assert service.toggle_worker_status("New Hire") is None
        assert Shift.objects.get(pk=1).status == "Scheduled"

    def test_unknown_name_is_noop(self, service):
        assert service.toggle_worker_status("Nobody") is None
        assert service.toggle_worker_status(None) is None

    def test_prefers_linked_worker_over_name_match(self, service, store):
        # An unlinked shift that happens to share the worker's name.
        store.create("shifts", id=1, name="Alex", status="On Duty")
        service.add_worker("Alex", "Cook", "9-5")
        linked = Shift.objects.get(worker__username="Alex")
        Shift.objects.filter(pk=linked.pk).update(status="Off Duty")

        service.toggle_worker_status("Alex")

        assert Shift.objects.get(pk=linked.pk).status == "On Duty"
        assert Shift.objects.get(pk=1).status == "On Duty"

    def test_first_match_wins_for_unlinked_duplicates(self, service, store):
        store.create("shifts", id=1, name="Sam", status="On Duty")
        store.create("shifts", id=2, name="Sam", status="On Duty")
        service.toggle_worker_status("Sam")
        assert Shift.objects.get(pk=1).status == "Off Duty"
        assert Shift.objects.get(pk=2).status == "On Duty"
