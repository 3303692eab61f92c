"""Question DAO: SQL access to the questions table.

Invariants:
    - delete_question parses the identifier before touching the database
    - Deleting a missing question is a no-op, not an error
    - get_questions returns questions oldest first, ties broken by question_uuid
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from qa_api.infrastructure.database import to_database_error
from qa_api.models.question import Question as QuestionModel
from qa_api.persistence.dao_helpers import parse_uuid, to_question_detail
from qa_api.schemas.question import Question, QuestionDetail

logger = logging.getLogger(__name__)


class SqlQuestionDao:
    """QuestionDao backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_question(self, question: Question) -> QuestionDetail:
        row = QuestionModel(
            title=question.title, description=question.description,
        )
        try:
            self.db.add(row)
            await self.db.commit()
            await self.db.refresh(row)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to insert question: {e}")
            raise to_database_error(e) from e
        return to_question_detail(row)

    async def delete_question(self, question_uuid: str) -> None:
        question_id = parse_uuid(question_uuid)
        try:
            await self.db.execute(
                delete(QuestionModel).where(
                    QuestionModel.question_uuid == question_id,
                ),
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Failed to delete question: {e}",
                extra={"question_uuid": question_uuid},
            )
            raise to_database_error(e) from e

    async def get_questions(self) -> list[QuestionDetail]:
        try:
            result = await self.db.execute(
                select(QuestionModel).order_by(
                    QuestionModel.created_at, QuestionModel.question_uuid,
                ),
            )
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to read questions: {e}")
            raise to_database_error(e) from e
        return [to_question_detail(row) for row in rows]
