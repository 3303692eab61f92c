"""Handler test fixtures: fake DAOs instead of a database."""

import pytest

from tests.services.fake_daos import FakeAnswerDao, FakeQuestionDao


@pytest.fixture
def fake_question_dao():
    return FakeQuestionDao()


@pytest.fixture
def fake_answer_dao():
    return FakeAnswerDao()
