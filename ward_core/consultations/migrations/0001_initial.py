from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Consultation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("consultation_specialty", models.CharField(db_index=True, max_length=128)),
                ("requesting_department", models.CharField(blank=True, max_length=128)),
                (
                    "status",
                    models.CharField(
                        choices=[("active", "Active"), ("closed", "Closed")],
                        db_index=True,
                        default="active",
                        max_length=16,
                    ),
                ),
                (
                    "urgency",
                    models.CharField(
                        choices=[("routine", "Routine"), ("urgent", "Urgent"), ("emergency", "Emergency")],
                        default="routine",
                        max_length=16,
                    ),
                ),
                ("patient_name", models.CharField(max_length=255)),
                ("mrn", models.CharField(db_index=True, max_length=64)),
                ("age", models.PositiveIntegerField(blank=True, null=True)),
                ("gender", models.CharField(blank=True, max_length=16)),
                ("doctor_name", models.CharField(blank=True, max_length=255)),
                ("reason", models.TextField(blank=True)),
                (
                    "doctor",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="consultations",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "consultations_consultation",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["consultation_specialty", "status"], name="consult_specialty_status_idx"),
                ],
            },
        ),
    ]
