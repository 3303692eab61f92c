"""Question Schemas: request and response shapes for /question endpoints.

Invariants:
    - title and description are at most 255 chars (column width)
    - QuestionDetail carries identifiers and timestamps as strings
"""

from pydantic import BaseModel, Field


class Question(BaseModel):
    """Question creation payload."""
    title: str = Field(max_length=255)
    description: str = Field(max_length=255)


class QuestionDetail(BaseModel):
    """Stored question as returned to clients."""
    question_uuid: str
    title: str
    description: str
    created_at: str
