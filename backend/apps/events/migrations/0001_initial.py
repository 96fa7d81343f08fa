import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("start_date", models.DateTimeField()),
                ("end_date", models.DateTimeField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "site",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="events",
                        to="core.site",
                    ),
                ),
            ],
            options={
                "db_table": "events_event",
                "ordering": ["start_date", "name"],
                "indexes": [models.Index(fields=["site", "start_date"], name="idx_events_site_start")],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(start_date__lte=models.F("end_date")),
                        name="ck_events_event_start_before_end",
                    )
                ],
            },
        ),
    ]
