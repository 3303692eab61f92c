"""Question Handlers: translate QuestionDao results into client-facing outcomes.

Invariants:
    - InvalidUUIDError from the DAO becomes BadRequestError with the same message
    - Any other DAO error becomes InternalError with the default message
    - Every failure is logged before it is translated
"""

import logging

from qa_api.core.errors import BadRequestError, InternalError, InvalidUUIDError
from qa_api.core.repository_protocols import QuestionDao
from qa_api.schemas.question import Question, QuestionDetail

logger = logging.getLogger(__name__)


async def create_question(
    question: Question, question_dao: QuestionDao,
) -> QuestionDetail:
    try:
        return await question_dao.create_question(question)
    except Exception as e:
        logger.error(f"Unexpected error on create_question: {e!r}")
        raise InternalError() from e


async def get_questions(question_dao: QuestionDao) -> list[QuestionDetail]:
    try:
        return await question_dao.get_questions()
    except Exception as e:
        logger.error(f"Failed to read questions: {e!r}")
        raise InternalError() from e


async def delete_question(
    question_uuid: str, question_dao: QuestionDao,
) -> None:
    try:
        await question_dao.delete_question(question_uuid)
    except InvalidUUIDError as e:
        logger.error(
            f"Error on deleting question: {e.message}",
            extra={"question_uuid": question_uuid},
        )
        raise BadRequestError(e.message) from e
    except Exception as e:
        logger.error(
            f"Error on deleting question: {e!r}",
            extra={"question_uuid": question_uuid},
        )
        raise InternalError() from e
