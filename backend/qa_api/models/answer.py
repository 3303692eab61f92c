"""Answer ORM: a reply to exactly one question.

Invariants:
    - answer_uuid is UUID primary key, generated on insert
    - question_uuid must reference an existing question (FK, ON DELETE CASCADE)
    - content is non-nullable, at most 255 chars
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from qa_api.db.base import Base


class Answer(Base):
    """Answer entity - belongs to a Question."""
    __tablename__ = "answers"

    answer_uuid: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    question_uuid: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("questions.question_uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    question: Mapped["Question"] = relationship(
        "Question", back_populates="answers",
    )
