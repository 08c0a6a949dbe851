# ward_core/longstay/store.py
from __future__ import annotations

import abc
import logging
from dataclasses import dataclass
from datetime import datetime

from asgiref.sync import sync_to_async
from django.db import DatabaseError

from ward_core.audit.services import AuditService
from ward_core.common.errors import PersistenceError, ValidationError
from ward_core.longstay.models import LongStayNote
from ward_core.patients.models import Patient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoteEntry:
    id: int
    patient_id: int
    content: str
    created_by_id: int
    created_by_name: str
    created_at: datetime
    updated_at: datetime


class NoteStore(abc.ABC):
    """
    Persistence boundary for long-stay notes.

    Implementations assign id and created_at themselves and return the
    persisted note; query results are newest first.
    """

    @abc.abstractmethod
    async def query_notes(self, patient_id: int) -> list[NoteEntry]:
        ...

    @abc.abstractmethod
    async def append_note(self, patient_id: int, content: str, actor_id: int) -> NoteEntry:
        ...


def note_entry(note: LongStayNote) -> NoteEntry:
    user = note.created_by
    return NoteEntry(
        id=note.id,
        patient_id=note.patient_id,
        content=note.content,
        created_by_id=note.created_by_id,
        created_by_name=user.get_full_name() or user.get_username(),
        created_at=note.created_at,
        updated_at=note.updated_at,
    )


class DjangoNoteStore(NoteStore):
    """NoteStore on the Django async ORM."""

    async def query_notes(self, patient_id: int) -> list[NoteEntry]:
        try:
            qs = (
                LongStayNote.objects.filter(patient_id=patient_id)
                .select_related("created_by")
                .order_by("-created_at", "-id")
            )
            return [note_entry(n) async for n in qs]
        except DatabaseError as exc:
            logger.error("loading long-stay notes for patient %s failed: %s", patient_id, exc)
            raise PersistenceError("Could not load long-stay notes.", detail={"patient_id": patient_id}) from exc

    async def append_note(self, patient_id: int, content: str, actor_id: int) -> NoteEntry:
        try:
            if not await Patient.objects.filter(id=patient_id).aexists():
                raise ValidationError("Patient not found.", code="not_found", detail={"patient_id": patient_id})

            note = await LongStayNote.objects.acreate(
                patient_id=patient_id,
                content=content,
                created_by_id=actor_id,
            )
            await sync_to_async(AuditService.log)(
                event_code="long_stay_note.created",
                entity_type="LongStayNote",
                entity_id=note.id,
                actor_user_id=actor_id,
                metadata={"patient_id": patient_id},
            )
            saved = await LongStayNote.objects.select_related("created_by").aget(id=note.id)
            return note_entry(saved)
        except DatabaseError as exc:
            logger.error("saving long-stay note for patient %s failed: %s", patient_id, exc)
            raise PersistenceError("Could not save long-stay note.", detail={"patient_id": patient_id}) from exc
