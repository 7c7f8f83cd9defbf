from rest_framework import serializers

from resto_dashboard.operations.models import Appointment
from resto_dashboard.operations.models import Delivery
from resto_dashboard.operations.models import Shift
from resto_dashboard.operations.models import Training


class ShiftSerializer(serializers.ModelSerializer):
    class Meta:
        model = Shift
        fields = ["id", "name", "role", "time", "status", "worker"]
        read_only_fields = ["id", "worker"]


class DeliverySerializer(serializers.ModelSerializer):
    class Meta:
        model = Delivery
        fields = ["id", "label", "items", "address", "status"]
        read_only_fields = ["id"]


class TrainingSerializer(serializers.ModelSerializer):
    class Meta:
        model = Training
        fields = ["id", "topic", "trainer", "time", "attendees"]
        read_only_fields = ["id"]


class AppointmentSerializer(serializers.ModelSerializer):
    """Exposes `with_name` under its wire name `with`."""

    class Meta:
        model = Appointment
        fields = ["id", "with_name", "purpose", "time", "location"]
        read_only_fields = ["id"]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        return {
            "id": data["id"],
            "with": data["with_name"],
            "purpose": data["purpose"],
            "time": data["time"],
            "location": data["location"],
        }
