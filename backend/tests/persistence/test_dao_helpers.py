"""DAO helpers: UUID parsing and FK violation detection."""

from uuid import UUID

import pytest
from sqlalchemy.exc import IntegrityError

from qa_api.core.errors import InvalidUUIDError
from qa_api.persistence.dao_helpers import is_foreign_key_violation, parse_uuid

VALID_UUID = "a22abcd2-22ab-2222-a22b-2abc2a2b22cc"


class _PgDriverError(Exception):
    def __init__(self, sqlstate):
        super().__init__("driver error")
        self.sqlstate = sqlstate


def test_parse_uuid_accepts_hyphenated_and_simple_forms():
    assert parse_uuid(VALID_UUID) == UUID(VALID_UUID)
    assert parse_uuid(VALID_UUID.replace("-", "")) == UUID(VALID_UUID)


def test_parse_uuid_rejects_garbage():
    with pytest.raises(InvalidUUIDError) as exc_info:
        parse_uuid("not-a-uuid")
    assert "not-a-uuid" in exc_info.value.message


def test_fk_violation_detected_from_sqlstate():
    err = IntegrityError("INSERT", {}, _PgDriverError("23503"))
    assert is_foreign_key_violation(err)


def test_other_sqlstate_is_not_fk_violation():
    err = IntegrityError("INSERT", {}, _PgDriverError("23505"))
    assert not is_foreign_key_violation(err)


def test_fk_violation_detected_from_sqlite_message():
    err = IntegrityError("INSERT", {}, Exception("FOREIGN KEY constraint failed"))
    assert is_foreign_key_violation(err)
