# ward_core/longstay/tests/test_notes_log.py
import asyncio
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from ward_core.common.errors import NotAuthenticatedError, PersistenceError, ValidationError
from ward_core.longstay.notes import LongStayNotesLog
from ward_core.longstay.store import NoteEntry, NoteStore

T0 = datetime(2024, 3, 15, 8, 0, tzinfo=timezone.utc)

NURSE = SimpleNamespace(id=5, is_authenticated=True)


class MemoryNoteStore(NoteStore):
    """In-memory store; `delay` yields to the loop mid-call so overlaps would show up."""

    def __init__(self, delay=0.0):
        self.rows: list[NoteEntry] = []
        self.delay = delay
        self.active = 0
        self.max_active = 0
        self.fail_with: Exception | None = None

    async def _enter(self):
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        await asyncio.sleep(self.delay)
        if self.fail_with is not None:
            self.active -= 1
            raise self.fail_with

    async def query_notes(self, patient_id):
        await self._enter()
        self.active -= 1
        rows = [r for r in self.rows if r.patient_id == patient_id]
        return sorted(rows, key=lambda r: (r.created_at, r.id), reverse=True)

    async def append_note(self, patient_id, content, actor_id):
        await self._enter()
        self.active -= 1
        n = len(self.rows) + 1
        entry = NoteEntry(
            id=n,
            patient_id=patient_id,
            content=content,
            created_by_id=actor_id,
            created_by_name="Nora Nurse",
            created_at=T0 + timedelta(minutes=n),
            updated_at=T0 + timedelta(minutes=n),
        )
        self.rows.append(entry)
        return entry


def run(coro):
    return asyncio.run(coro)


def test_append_puts_new_note_first_in_cache_and_store():
    store = MemoryNoteStore()
    log = LongStayNotesLog(store)

    async def scenario():
        await log.append(1, "first", NURSE)
        second = await log.append(1, "  second  ", NURSE)
        fetched = await log.fetch(1)
        return second, fetched

    second, fetched = run(scenario())

    assert second.content == "second"
    assert log.notes_for(1)[0] == second
    assert [n.content for n in fetched] == ["second", "first"]
    assert log.notes_for(1) == fetched


def test_fetch_replaces_cache_for_that_patient_only():
    store = MemoryNoteStore()
    log = LongStayNotesLog(store)

    async def scenario():
        await log.append(1, "for one", NURSE)
        await log.append(2, "for two", NURSE)
        store.rows = [r for r in store.rows if r.patient_id != 1]
        await log.fetch(1)

    run(scenario())

    assert log.notes_for(1) == ()
    assert [n.content for n in log.notes_for(2)] == ["for two"]


@pytest.mark.parametrize(
    "actor",
    [None, SimpleNamespace(id=None, is_authenticated=True), SimpleNamespace(id=5, is_authenticated=False)],
)
def test_append_requires_authenticated_actor(actor):
    store = MemoryNoteStore()
    log = LongStayNotesLog(store)

    with pytest.raises(NotAuthenticatedError) as exc:
        run(log.append(1, "note", actor))

    assert exc.value.message == "User not authenticated"
    assert store.rows == []
    assert log.notes_for(1) == ()


def test_blank_content_rejected_without_touching_store():
    store = MemoryNoteStore()
    log = LongStayNotesLog(store)

    with pytest.raises(ValidationError):
        run(log.append(1, "   ", NURSE))

    assert store.rows == []


def test_store_failure_sets_error_and_leaves_cache():
    store = MemoryNoteStore()
    log = LongStayNotesLog(store)
    run(log.append(1, "kept", NURSE))

    store.fail_with = PersistenceError("Could not save long-stay note.")
    with pytest.raises(PersistenceError):
        run(log.append(1, "lost", NURSE))

    assert log.error == "Could not save long-stay note."
    assert log.loading is False
    assert [n.content for n in log.notes_for(1)] == ["kept"]

    store.fail_with = None
    run(log.fetch(1))
    assert log.error is None


def test_loading_is_true_only_while_a_call_is_in_flight():
    store = MemoryNoteStore(delay=0.01)
    log = LongStayNotesLog(store)
    seen = []

    async def scenario():
        task = asyncio.ensure_future(log.fetch(1))
        await asyncio.sleep(0)
        seen.append(log.loading)
        await task
        seen.append(log.loading)

    run(scenario())
    assert seen == [True, False]


def test_calls_for_same_patient_do_not_overlap():
    store = MemoryNoteStore(delay=0.01)
    log = LongStayNotesLog(store)

    async def scenario():
        await asyncio.gather(
            log.append(1, "a", NURSE),
            log.append(1, "b", NURSE),
            log.fetch(1),
            log.append(1, "c", NURSE),
        )

    run(scenario())

    assert store.max_active == 1
    assert len(log.notes_for(1)) == 3
    assert log.notes_for(1)[0].content == "c"


def test_calls_for_different_patients_may_interleave():
    store = MemoryNoteStore(delay=0.01)
    log = LongStayNotesLog(store)

    async def scenario():
        await asyncio.gather(log.append(1, "a", NURSE), log.append(2, "b", NURSE))

    run(scenario())

    assert store.max_active == 2
