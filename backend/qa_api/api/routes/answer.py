"""Answer Routes: create, list and delete answers.

Invariants:
    - Routes hold no logic: parse, call the handler, return
    - Identifiers in paths and bodies are plain strings; the DAO validates them
"""


from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from qa_api.core.repository_protocols import AnswerDao
from qa_api.infrastructure.database import get_db
from qa_api.persistence.answer_dao import SqlAnswerDao
from qa_api.schemas.answer import Answer, AnswerDetail
from qa_api.services import handle_answers

router = APIRouter(tags=["answers"])


def get_answer_dao(db: AsyncSession = Depends(get_db)) -> AnswerDao:
    return SqlAnswerDao(db)


@router.post("/answer", response_model=AnswerDetail)
async def create_answer(
    body: Answer, answer_dao: AnswerDao = Depends(get_answer_dao),
):
    """Post an answer to an existing question."""
    return await handle_answers.create_answer(body, answer_dao)


@router.get("/answers/{question_uuid}", response_model=list[AnswerDetail])
async def read_answers(
    question_uuid: str, answer_dao: AnswerDao = Depends(get_answer_dao),
):
    """List the answers of one question."""
    return await handle_answers.get_answers(question_uuid, answer_dao)


@router.delete("/answer/{answer_uuid}")
async def delete_answer(
    answer_uuid: str, answer_dao: AnswerDao = Depends(get_answer_dao),
):
    await handle_answers.delete_answer(answer_uuid, answer_dao)
    return Response(status_code=status.HTTP_200_OK)
