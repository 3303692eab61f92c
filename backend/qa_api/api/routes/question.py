"""Question Routes: create, list and delete questions.

Invariants:
    - Routes hold no logic: parse, call the handler, return
    - question_uuid path segment is a plain string; the DAO validates it
    - Handler errors propagate to the global QAError handler
"""


from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from qa_api.core.repository_protocols import QuestionDao
from qa_api.infrastructure.database import get_db
from qa_api.persistence.question_dao import SqlQuestionDao
from qa_api.schemas.question import Question, QuestionDetail
from qa_api.services import handle_questions

router = APIRouter(tags=["questions"])


def get_question_dao(db: AsyncSession = Depends(get_db)) -> QuestionDao:
    return SqlQuestionDao(db)


@router.post("/question", response_model=QuestionDetail)
async def create_question(
    body: Question, question_dao: QuestionDao = Depends(get_question_dao),
):
    """Create a question."""
    return await handle_questions.create_question(body, question_dao)


@router.get("/questions", response_model=list[QuestionDetail])
async def read_questions(
    question_dao: QuestionDao = Depends(get_question_dao),
):
    """List all questions."""
    return await handle_questions.get_questions(question_dao)


@router.delete("/question/{question_uuid}")
async def delete_question(
    question_uuid: str, question_dao: QuestionDao = Depends(get_question_dao),
):
    """Delete a question and, by cascade, its answers."""
    await handle_questions.delete_question(question_uuid, question_dao)
    return Response(status_code=status.HTTP_200_OK)
