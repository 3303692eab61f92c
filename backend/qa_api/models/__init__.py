"""ORM Models: SQLAlchemy declarative models for questions and answers.

Invariants:
    - All models inherit from Base (db/base.py)
    - Question is the aggregate root; answers are scoped by question_uuid

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from qa_api.models.question import Question  # noqa: F401
from qa_api.models.answer import Answer  # noqa: F401
