# ward_core/longstay/notes.py
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from ward_core.common.errors import NotAuthenticatedError, ValidationError
from ward_core.longstay.store import DjangoNoteStore, NoteEntry, NoteStore

logger = logging.getLogger(__name__)


class LongStayNotesLog:
    """
    Per-session cache of long-stay notes, newest first per patient.

    Calls for the same patient run one at a time; calls for different
    patients may interleave. `loading` is True while any call is in flight
    and `error` keeps the message of the last failure. Failures are re-raised.
    """

    def __init__(self, store: Optional[NoteStore] = None):
        self.store = store or DjangoNoteStore()
        self.notes: dict[int, tuple[NoteEntry, ...]] = {}
        self.error: str | None = None
        self._in_flight = 0
        self._locks: dict[int, asyncio.Lock] = {}

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    def notes_for(self, patient_id: int) -> tuple[NoteEntry, ...]:
        return self.notes.get(patient_id, ())

    def _lock_for(self, patient_id: int) -> asyncio.Lock:
        lock = self._locks.get(patient_id)
        if lock is None:
            lock = self._locks[patient_id] = asyncio.Lock()
        return lock

    async def fetch(self, patient_id: int) -> tuple[NoteEntry, ...]:
        async with self._lock_for(patient_id):
            self._in_flight += 1
            self.error = None
            try:
                entries = await self.store.query_notes(patient_id)
            except Exception as exc:
                self.error = getattr(exc, "message", None) or str(exc)
                raise
            finally:
                self._in_flight -= 1

            self.notes[patient_id] = tuple(entries)
            return self.notes[patient_id]

    async def append(self, patient_id: int, content: str, actor) -> NoteEntry:
        actor_id = getattr(actor, "id", None) if actor is not None else None
        if actor_id is None or not getattr(actor, "is_authenticated", False):
            raise NotAuthenticatedError("User not authenticated")

        text = (content or "").strip()
        if not text:
            raise ValidationError("Note content is required.", detail={"content": content})

        async with self._lock_for(patient_id):
            self._in_flight += 1
            self.error = None
            try:
                entry = await self.store.append_note(patient_id, text, actor_id)
            except Exception as exc:
                self.error = getattr(exc, "message", None) or str(exc)
                raise
            finally:
                self._in_flight -= 1

            # single assignment: readers see the old list or the new one, never a partial
            self.notes[patient_id] = (entry, *self.notes.get(patient_id, ()))

        logger.info("long-stay note %s added for patient %s by user %s", entry.id, patient_id, actor_id)
        return entry
