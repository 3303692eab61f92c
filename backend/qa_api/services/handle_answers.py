"""Answer Handlers: translate AnswerDao results into client-facing outcomes.

Invariants:
    - InvalidUUIDError from the DAO becomes BadRequestError with the same message
    - Any other DAO error becomes InternalError with the default message
"""

import logging

from qa_api.core.errors import BadRequestError, InternalError, InvalidUUIDError
from qa_api.core.repository_protocols import AnswerDao
from qa_api.schemas.answer import Answer, AnswerDetail

logger = logging.getLogger(__name__)


async def create_answer(answer: Answer, answer_dao: AnswerDao) -> AnswerDetail:
    try:
        return await answer_dao.create_answer(answer)
    except InvalidUUIDError as e:
        logger.error(
            f"Invalid question on create_answer: {e.message}",
            extra={"question_uuid": answer.question_uuid},
        )
        raise BadRequestError(e.message) from e
    except Exception as e:
        logger.error(f"Unexpected error on create_answer: {e!r}")
        raise InternalError() from e


async def get_answers(
    question_uuid: str, answer_dao: AnswerDao,
) -> list[AnswerDetail]:
    try:
        return await answer_dao.get_answers(question_uuid)
    except InvalidUUIDError as e:
        logger.error(
            f"Error on get_answers: {e.message}",
            extra={"question_uuid": question_uuid},
        )
        raise BadRequestError(e.message) from e
    except Exception as e:
        logger.error(
            f"Error on get_answers: {e!r}",
            extra={"question_uuid": question_uuid},
        )
        raise InternalError() from e


async def delete_answer(answer_uuid: str, answer_dao: AnswerDao) -> None:
    try:
        await answer_dao.delete_answer(answer_uuid)
    except InvalidUUIDError as e:
        logger.error(
            f"Error on delete_answer: {e.message}",
            extra={"answer_uuid": answer_uuid},
        )
        raise BadRequestError(e.message) from e
    except Exception as e:
        logger.error(
            f"Error on delete_answer: {e!r}",
            extra={"answer_uuid": answer_uuid},
        )
        raise InternalError() from e
