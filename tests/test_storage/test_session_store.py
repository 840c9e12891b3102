"""Tests for the file-backed session store."""

import json
from datetime import date

import pytest
from pydantic import ValidationError

from clinical_narrative.exceptions import CorruptSessionError, InvalidSessionIdError, SessionNotFoundError
from clinical_narrative.narrative import Session
from clinical_narrative.storage import SessionStore


@pytest.fixture
def store(tmp_path):
    return SessionStore(tmp_path / "sessions")


class TestSessionStore:
    """Tests for SessionStore."""

    def test_creates_directory(self, tmp_path):
        SessionStore(tmp_path / "nested" / "sessions")
        assert (tmp_path / "nested" / "sessions").is_dir()

    def test_save_and_load(self, store, sample_session):
        store.save(sample_session)

        assert (store.directory / "session_1700000000000.json").exists()
        assert store.load("session_1700000000000") == sample_session

    def test_load_from_disk_in_new_store(self, store, sample_session):
        store.save(sample_session)

        reopened = SessionStore(store.directory)

        assert reopened.load(sample_session.session_id) == sample_session

    def test_save_upserts(self, store, sample_session):
        store.save(sample_session)
        store.save(sample_session.model_copy(update={"narrative": "Updated."}))

        reopened = SessionStore(store.directory)
        assert reopened.load(sample_session.session_id).narrative == "Updated."
        assert len(reopened.list()) == 1

    def test_load_missing(self, store):
        with pytest.raises(SessionNotFoundError) as exc_info:
            store.load("session_0")
        assert exc_info.value.session_id == "session_0"

    def test_list_sorted_by_date_then_id(self, store):
        store.save(Session(session_id="session_3", session_date=date(2024, 5, 1)))
        store.save(Session(session_id="session_2", session_date=date(2024, 1, 1)))
        store.save(Session(session_id="session_1", session_date=date(2024, 5, 1)))

        assert [s.session_id for s in store.list()] == ["session_2", "session_1", "session_3"]

    def test_list_skips_corrupt_files(self, store, sample_session):
        store.save(sample_session)
        (store.directory / "broken.json").write_text("{not json")
        (store.directory / "wrong.json").write_text('{"total_duration": -1}')

        reopened = SessionStore(store.directory)

        assert [s.session_id for s in reopened.list()] == [sample_session.session_id]

    def test_delete(self, store, sample_session):
        store.save(sample_session)

        store.delete(sample_session.session_id)

        assert not store.exists(sample_session.session_id)
        assert not (store.directory / f"{sample_session.session_id}.json").exists()
        assert store.list() == []

    def test_delete_missing(self, store):
        with pytest.raises(SessionNotFoundError):
            store.delete("session_0")

    def test_export(self, store, sample_session):
        store.save(sample_session)

        exported = json.loads(store.export())

        assert len(exported) == 1
        assert exported[0]["session_id"] == sample_session.session_id
        assert exported[0]["session_date"] == "2024-03-04"
        assert exported[0]["interventions"][0]["cpt_code"] == "97530"

    def test_session_id_must_be_a_plain_name(self):
        with pytest.raises(ValidationError):
            Session(session_id="../../escaped")

    def test_save_rejects_path_like_id(self, store, sample_session, tmp_path):
        unsafe = sample_session.model_copy(update={"session_id": "../../escaped"})

        with pytest.raises(InvalidSessionIdError):
            store.save(unsafe)

        assert not (tmp_path / "escaped.json").exists()
        assert not (tmp_path.parent / "escaped.json").exists()
        assert store.list() == []

    def test_path_like_id_is_not_found(self, store):
        assert not store.exists("../sessions")
        with pytest.raises(SessionNotFoundError):
            store.load("../../escaped")
        with pytest.raises(SessionNotFoundError):
            store.delete("../../escaped")

    def test_failed_write_is_not_cached(self, store, sample_session, monkeypatch):
        def failing_open(*args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr("clinical_narrative.storage.session_store.open", failing_open, raising=False)

        with pytest.raises(OSError):
            store.save(sample_session)

        assert not store.exists(sample_session.session_id)
        assert store.list() == []
        with pytest.raises(SessionNotFoundError):
            store.load(sample_session.session_id)

    def test_load_corrupt_file(self, store):
        (store.directory / "session_9.json").write_text("{not json")

        with pytest.raises(CorruptSessionError) as exc_info:
            store.load("session_9")

        assert isinstance(exc_info.value, SessionNotFoundError)
        assert exc_info.value.session_id == "session_9"
