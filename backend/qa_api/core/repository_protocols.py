"""Boundary Protocols: contracts between the handlers and persistence.

Invariants:
    - Handlers depend on these Protocols, never on SQL implementations
    - Identifiers cross the boundary as strings; implementations parse them
    - Implementations raise InvalidUUIDError or DatabaseError (core/errors.py), nothing else

Design Decisions:
    - Protocol over ABC: fakes in tests need no inheritance
"""

from typing import Protocol

from qa_api.schemas.question import Question, QuestionDetail
from qa_api.schemas.answer import Answer, AnswerDetail


class QuestionDao(Protocol):
    """Contract for question persistence."""
    async def create_question(self, question: Question) -> QuestionDetail: ...
    async def delete_question(self, question_uuid: str) -> None: ...
    async def get_questions(self) -> list[QuestionDetail]: ...


class AnswerDao(Protocol):
    """Contract for answer persistence."""
    async def create_answer(self, answer: Answer) -> AnswerDetail: ...
    async def delete_answer(self, answer_uuid: str) -> None: ...
    async def get_answers(self, question_uuid: str) -> list[AnswerDetail]: ...
