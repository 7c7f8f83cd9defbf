import django.db.models.deletion
from django.conf import settings
from django.db import migrations
from django.db import models

import resto_dashboard.operations.models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Appointment",
            fields=[
                (
                    "id",
                    models.BigIntegerField(
                        default=resto_dashboard.operations.models.generate_record_id,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("with_name", models.CharField(db_column="with", max_length=255)),
                ("purpose", models.CharField(blank=True, max_length=255)),
                ("time", models.CharField(blank=True, max_length=255)),
                ("location", models.CharField(blank=True, max_length=255)),
            ],
            options={
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Delivery",
            fields=[
                (
                    "id",
                    models.BigIntegerField(
                        default=resto_dashboard.operations.models.generate_record_id,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("label", models.CharField(max_length=255)),
                ("items", models.TextField(blank=True)),
                ("address", models.CharField(blank=True, max_length=255)),
                ("status", models.CharField(blank=True, max_length=64)),
            ],
            options={
                "ordering": ["id"],
                "verbose_name_plural": "deliveries",
            },
        ),
        migrations.CreateModel(
            name="Training",
            fields=[
                (
                    "id",
                    models.BigIntegerField(
                        default=resto_dashboard.operations.models.generate_record_id,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("topic", models.CharField(max_length=255)),
                ("trainer", models.CharField(blank=True, max_length=255)),
                ("time", models.CharField(blank=True, max_length=255)),
                ("attendees", models.IntegerField(default=0)),
            ],
            options={
                "ordering": ["id"],
                "verbose_name_plural": "training sessions",
            },
        ),
        migrations.CreateModel(
            name="Shift",
            fields=[
                (
                    "id",
                    models.BigIntegerField(
                        default=resto_dashboard.operations.models.generate_record_id,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("role", models.CharField(blank=True, max_length=255)),
                ("time", models.CharField(blank=True, max_length=255)),
                ("status", models.CharField(default="Scheduled", max_length=64)),
                (
                    "worker",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="shifts",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["id"],
            },
        ),
    ]
