# ward_core/longstay/admin.py
from django.contrib import admin

from ward_core.longstay.models import LongStayNote


@admin.register(LongStayNote)
class LongStayNoteAdmin(admin.ModelAdmin):
    list_display = ("patient", "created_by", "created_at")
    search_fields = ("patient__mrn", "patient__name", "content")
    readonly_fields = ("patient", "content", "created_by", "created_at", "updated_at")
    ordering = ("-created_at", "-id")

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
