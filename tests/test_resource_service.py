import logging
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from services.errors import StorageError, ValidationError
from services.resource_service import ResourceService
from utils.security import TokenData


def _caller(teacher_id: int = 1, username: str = "teacher") -> TokenData:
    return TokenData(id=teacher_id, username=username, iat=0, exp=9999999999)


def _broken_session() -> MagicMock:
    session = MagicMock()
    session.query.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))
    session.commit.side_effect = OperationalError("INSERT", {}, Exception("connection refused"))
    return session


def test_validation_happens_before_store_access():
    session = MagicMock()
    service = ResourceService(session)

    with pytest.raises(ValidationError):
        service.create_class("  ", None, _caller())
    with pytest.raises(ValidationError):
        service.create_material(1, "", "content")
    with pytest.raises(ValidationError):
        service.create_student(1, None)
    with pytest.raises(ValidationError):
        service.create_update(1, "\n")

    assert session.method_calls == []


def test_connection_failure_on_read_is_storage_error(caplog):
    session = _broken_session()
    service = ResourceService(session)

    with caplog.at_level(logging.ERROR, logger="services.resource_service"):
        with pytest.raises(StorageError) as exc_info:
            service.list_classes()

    records = [r for r in caplog.records if r.name == "services.resource_service"]
    assert len(records) == 1
    assert records[0].levelno == logging.ERROR
    assert records[0].exc_info is not None
    assert "connection refused" in caplog.text

    assert exc_info.value.message == "Server error fetching classes"
    assert "connection refused" not in exc_info.value.message
    session.rollback.assert_called_once()


def test_connection_failure_on_write_is_storage_error():
    session = _broken_session()
    service = ResourceService(session)

    with pytest.raises(StorageError) as exc_info:
        service.create_student(1, "Minji")

    assert exc_info.value.status_code == 500
    session.rollback.assert_called_once()


def test_create_under_missing_parent_is_storage_error(db):
    service = ResourceService(db)

    with pytest.raises(StorageError):
        service.create_material(42, "Title", "Content")
    with pytest.raises(StorageError):
        service.create_student(42, "Nobody")
    with pytest.raises(StorageError):
        service.create_update(42, "Lost")


def test_session_usable_after_storage_error(db):
    service = ResourceService(db)

    with pytest.raises(StorageError):
        service.create_student(42, "Nobody")

    created = service.create_class("Recovered", None, _caller())
    assert created.id == 1


def test_blank_description_stored_as_null(db):
    created = ResourceService(db).create_class("History", "   ", _caller())
    assert created.description is None


def test_fixed_owner_mode_ignores_caller(db):
    service = ResourceService(db, owner_mode="fixed", fixed_owner_username="teacher")

    created = service.create_class("Chemistry", None, _caller(teacher_id=999, username="someone"))

    assert created.teacher_id == 1


def test_fixed_owner_missing_is_storage_error(db):
    service = ResourceService(db, owner_mode="fixed", fixed_owner_username="nobody")

    with pytest.raises(StorageError):
        service.create_class("Chemistry", None, _caller())
    assert service.list_classes() == []


def test_caller_owner_mode_uses_token_identity(db):
    created = ResourceService(db, owner_mode="caller").create_class("Physics", None, _caller(teacher_id=1))
    assert created.teacher_id == 1


def test_caller_owner_unknown_teacher_is_storage_error(db):
    service = ResourceService(db, owner_mode="caller")

    with pytest.raises(StorageError):
        service.create_class("Physics", None, _caller(teacher_id=777))


def test_created_at_is_set_on_insert(db):
    service = ResourceService(db)
    cls = service.create_class("Music", None, _caller())
    student = service.create_student(cls.id, "Yuna")
    update = service.create_update(student.id, "Practiced scales")

    assert cls.created_at is not None
    assert update.created_at is not None
    assert service.list_updates(student.id)[0].id == update.id


def test_owner_mode_defaults_follow_settings(db, monkeypatch):
    from config.settings import settings

    monkeypatch.setattr(settings, "CLASS_OWNER_MODE", "fixed")
    service = ResourceService(db)

    assert service.owner_mode == "fixed"
    assert service.fixed_owner_username == settings.DEFAULT_TEACHER_USERNAME
