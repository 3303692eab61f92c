"""Question ORM: a question that answers are posted against.

Invariants:
    - question_uuid is UUID primary key, generated on insert
    - title and description are non-nullable, at most 255 chars
    - deleting a question deletes its answers (ORM cascade + ON DELETE CASCADE)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from qa_api.db.base import Base


class Question(Base):
    """Question entity - owns its answers."""
    __tablename__ = "questions"

    question_uuid: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    answers: Mapped[list["Answer"]] = relationship(
        "Answer", back_populates="question",
        cascade="all, delete-orphan", passive_deletes=True,
    )
