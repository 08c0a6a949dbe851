from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("patients", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Admission",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("department", models.CharField(db_index=True, max_length=128)),
                (
                    "status",
                    models.CharField(
                        choices=[("active", "Active"), ("discharged", "Discharged")],
                        db_index=True,
                        default="active",
                        max_length=16,
                    ),
                ),
                ("admission_date", models.DateField(db_index=True)),
                ("discharge_date", models.DateField(blank=True, null=True)),
                ("diagnosis", models.TextField(blank=True)),
                ("visit_number", models.PositiveIntegerField(default=1)),
                (
                    "shift_type",
                    models.CharField(
                        choices=[
                            ("morning", "Morning"),
                            ("evening", "Evening"),
                            ("night", "Night"),
                            ("weekend_morning", "Weekend Day (7:00 - 19:00)"),
                            ("weekend_night", "Weekend Night (19:00 - 7:00)"),
                        ],
                        default="morning",
                        max_length=32,
                    ),
                ),
                ("is_weekend", models.BooleanField(default=False, editable=False)),
                (
                    "safety_type",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("emergency", "Emergency"),
                            ("observation", "Observation"),
                            ("short-stay", "Short Stay"),
                        ],
                        max_length=16,
                        null=True,
                    ),
                ),
                (
                    "admitting_doctor",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="admissions",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "patient",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="admissions",
                        to="patients.patient",
                    ),
                ),
            ],
            options={
                "db_table": "admissions_admission",
                "ordering": ["-visit_number"],
                "indexes": [
                    models.Index(fields=["department", "status"], name="admissions_dept_status_idx"),
                    models.Index(fields=["patient", "visit_number"], name="admissions_patient_visit_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        condition=models.Q(("status", "active")),
                        fields=("patient",),
                        name="uq_active_admission_per_patient",
                    ),
                    models.UniqueConstraint(
                        fields=("patient", "visit_number"),
                        name="uq_admission_visit_number_per_patient",
                    ),
                ],
            },
        ),
    ]
