from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Appointment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("specialty", models.CharField(db_index=True, max_length=128)),
                (
                    "status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("completed", "Completed"), ("cancelled", "Cancelled")],
                        db_index=True,
                        default="pending",
                        max_length=16,
                    ),
                ),
                (
                    "appointment_type",
                    models.CharField(
                        choices=[("routine", "Routine"), ("urgent", "Urgent")],
                        default="routine",
                        max_length=16,
                    ),
                ),
                ("patient_name", models.CharField(max_length=255)),
                ("medical_number", models.CharField(db_index=True, max_length=64)),
                ("notes", models.TextField(blank=True)),
            ],
            options={
                "db_table": "appointments_appointment",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["specialty", "status"], name="appt_specialty_status_idx"),
                ],
            },
        ),
    ]
