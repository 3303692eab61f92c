"""Answer Schemas: request and response shapes for /answer endpoints.

Invariants:
    - content is at most 255 chars (column width)
    - Answer.question_uuid is a plain string; the DAO parses it, so a
      malformed identifier becomes a 400 from the handler
"""

from pydantic import BaseModel, Field


class Answer(BaseModel):
    """Answer creation payload."""
    question_uuid: str
    content: str = Field(max_length=255)


class AnswerDetail(BaseModel):
    """Stored answer as returned to clients."""
    answer_uuid: str
    question_uuid: str
    content: str
    created_at: str
