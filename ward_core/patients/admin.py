# ward_core/patients/admin.py
from django.contrib import admin

from ward_core.patients.models import Patient


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "mrn",
        "gender",
        "date_of_birth",
        "created_at",
    )
    search_fields = ("name", "mrn")
    readonly_fields = ("created_at", "updated_at")
    ordering = ("-created_at",)
