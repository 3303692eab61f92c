"""Answer DAO: SQL access to the answers table.

Invariants:
    - Every identifier is parsed before touching the database
    - An answer for a question that does not exist is InvalidUUIDError, not DatabaseError
    - Deleting a missing answer is a no-op
    - get_answers returns one question's answers, oldest first, ties broken by answer_uuid
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from qa_api.core.errors import InvalidUUIDError
from qa_api.infrastructure.database import to_database_error
from qa_api.models.answer import Answer as AnswerModel
from qa_api.persistence.dao_helpers import (
    is_foreign_key_violation, parse_uuid, to_answer_detail,
)
from qa_api.schemas.answer import Answer, AnswerDetail

logger = logging.getLogger(__name__)


class SqlAnswerDao:
    """AnswerDao backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_answer(self, answer: Answer) -> AnswerDetail:
        question_id = parse_uuid(answer.question_uuid)
        row = AnswerModel(question_uuid=question_id, content=answer.content)
        try:
            self.db.add(row)
            await self.db.commit()
            await self.db.refresh(row)
        except IntegrityError as e:
            await self.db.rollback()
            if is_foreign_key_violation(e):
                raise InvalidUUIDError(
                    f"Question '{answer.question_uuid}' does not exist",
                ) from e
            logger.error(f"Failed to insert answer: {e}")
            raise to_database_error(e) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to insert answer: {e}")
            raise to_database_error(e) from e
        return to_answer_detail(row)

    async def delete_answer(self, answer_uuid: str) -> None:
        answer_id = parse_uuid(answer_uuid)
        try:
            await self.db.execute(
                delete(AnswerModel).where(AnswerModel.answer_uuid == answer_id),
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Failed to delete answer: {e}",
                extra={"answer_uuid": answer_uuid},
            )
            raise to_database_error(e) from e

    async def get_answers(self, question_uuid: str) -> list[AnswerDetail]:
        question_id = parse_uuid(question_uuid)
        try:
            result = await self.db.execute(
                select(AnswerModel)
                .where(AnswerModel.question_uuid == question_id)
                .order_by(AnswerModel.created_at, AnswerModel.answer_uuid),
            )
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Failed to read answers: {e}",
                extra={"question_uuid": question_uuid},
            )
            raise to_database_error(e) from e
        return [to_answer_detail(row) for row in rows]
