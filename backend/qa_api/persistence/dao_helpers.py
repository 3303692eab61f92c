"""DAO Helpers: identifier parsing, error classification, row conversion.

Invariants:
    - parse_uuid raises InvalidUUIDError, never ValueError
    - Rows are converted to *Detail schemas with hyphenated UUIDs and ISO timestamps
"""

from uuid import UUID

from sqlalchemy.exc import IntegrityError

from qa_api.core.domain_types import PostgresErrorCode
from qa_api.core.errors import InvalidUUIDError
from qa_api.models.answer import Answer as AnswerModel
from qa_api.models.question import Question as QuestionModel
from qa_api.schemas.answer import AnswerDetail
from qa_api.schemas.question import QuestionDetail


def parse_uuid(value: str) -> UUID:
    """Parse a client-supplied identifier."""
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError) as e:
        raise InvalidUUIDError(f"Invalid UUID '{value}': {e}") from e


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    """True when the integrity error is a foreign-key violation.

    asyncpg exposes the SQLSTATE on the wrapped driver error; SQLite only
    reports it in the message text.
    """
    code = getattr(exc.orig, "sqlstate", None) or getattr(exc.orig, "pgcode", None)
    if code:
        return code == PostgresErrorCode.FOREIGN_KEY_VIOLATION
    return "foreign key constraint" in str(exc.orig).lower()


def to_question_detail(row: QuestionModel) -> QuestionDetail:
    return QuestionDetail(
        question_uuid=str(row.question_uuid),
        title=row.title,
        description=row.description,
        created_at=row.created_at.isoformat(),
    )


def to_answer_detail(row: AnswerModel) -> AnswerDetail:
    return AnswerDetail(
        answer_uuid=str(row.answer_uuid),
        question_uuid=str(row.question_uuid),
        content=row.content,
        created_at=row.created_at.isoformat(),
    )
