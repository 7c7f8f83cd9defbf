from django.contrib import admin

from resto_dashboard.operations import models


@admin.register(models.Shift)
class ShiftAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "role", "time", "status", "worker"]
    search_fields = ["name", "role", "status"]
    list_filter = ["status"]
    raw_id_fields = ["worker"]


@admin.register(models.Delivery)
class DeliveryAdmin(admin.ModelAdmin):
    list_display = ["id", "label", "items", "address", "status"]
    search_fields = ["label", "address", "status"]
    list_filter = ["status"]


@admin.register(models.Training)
class TrainingAdmin(admin.ModelAdmin):
    list_display = ["id", "topic", "trainer", "time", "attendees"]
    search_fields = ["topic", "trainer"]


@admin.register(models.Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ["id", "with_name", "purpose", "time", "location"]
    search_fields = ["with_name", "purpose", "location"]
