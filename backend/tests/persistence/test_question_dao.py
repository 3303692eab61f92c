"""Question DAO: verifies SQL behavior against a real (SQLite) database.

Invariants:
    - create_question returns the stored row with a generated UUID
    - Malformed identifiers raise InvalidUUIDError before any query runs
    - Any database failure surfaces as DatabaseError
    - Deleting a question removes its answers
"""

from datetime import datetime, timezone
from uuid import UUID

import pytest
from sqlalchemy import select

from qa_api.core.errors import DatabaseError, InvalidUUIDError
from qa_api.models.answer import Answer as AnswerModel
from qa_api.models.question import Question as QuestionModel
from qa_api.persistence.question_dao import SqlQuestionDao
from qa_api.schemas.answer import Answer
from qa_api.schemas.question import Question

VALID_UUID = "a22abcd2-22ab-2222-a22b-2abc2a2b22cc"


async def test_create_question_should_succeed(question_dao):
    result = await question_dao.create_question(
        Question(title="some_title", description="some_desc"),
    )

    assert result.title == "some_title"
    assert result.description == "some_desc"
    assert UUID(result.question_uuid)
    assert result.created_at


async def test_create_question_fails_on_database_error(broken_db):
    dao = SqlQuestionDao(broken_db)

    with pytest.raises(DatabaseError):
        await dao.create_question(
            Question(title="some_title", description="some_desc"),
        )


async def test_delete_question_fails_on_malformed_uuid(question_dao):
    with pytest.raises(InvalidUUIDError):
        await question_dao.delete_question("invalid_uui")


async def test_delete_question_fails_on_database_error(broken_db):
    dao = SqlQuestionDao(broken_db)

    with pytest.raises(DatabaseError):
        await dao.delete_question(VALID_UUID)


async def test_delete_missing_question_succeeds(question_dao):
    assert await question_dao.delete_question(VALID_UUID) is None


async def test_delete_question_removes_it(question_dao):
    created = await question_dao.create_question(
        Question(title="title", description="desc"),
    )

    await question_dao.delete_question(created.question_uuid)

    assert await question_dao.get_questions() == []


async def test_delete_question_cascades_to_answers(
    question_dao, answer_dao, test_db,
):
    question = await question_dao.create_question(
        Question(title="title", description="desc"),
    )
    await answer_dao.create_answer(
        Answer(question_uuid=question.question_uuid, content="content"),
    )

    await question_dao.delete_question(question.question_uuid)

    result = await test_db.execute(select(AnswerModel))
    assert result.scalars().all() == []


async def test_get_questions_fails_on_database_error(broken_db):
    dao = SqlQuestionDao(broken_db)

    with pytest.raises(DatabaseError):
        await dao.get_questions()


async def test_get_questions_returns_all_in_creation_order(question_dao):
    first = await question_dao.create_question(
        Question(title="first", description="1"),
    )
    second = await question_dao.create_question(
        Question(title="second", description="2"),
    )

    questions = await question_dao.get_questions()

    assert [q.question_uuid for q in questions] == [
        first.question_uuid, second.question_uuid,
    ]


async def test_get_questions_breaks_timestamp_ties_by_uuid(question_dao, test_db):
    created_at = datetime(2026, 1, 1, tzinfo=timezone.utc)
    for n in (2, 1):
        test_db.add(QuestionModel(
            question_uuid=UUID(int=n), title=f"q{n}", description="d",
            created_at=created_at,
        ))
    await test_db.commit()

    questions = await question_dao.get_questions()

    assert [q.question_uuid for q in questions] == [
        str(UUID(int=1)), str(UUID(int=2)),
    ]
