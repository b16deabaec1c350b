# tests/conftest.py

"""
Pytest Fixtures - Shared question builders and sample assessments

SAMPLE ASSESSMENT REFERENCE:
- q-lr-1: Logical Reasoning, multipleChoice, score 10, weight 3, correct [1]
- q-mr-1: Mathematical Reasoning, multipleSelect, score 15, weight 2, correct [0, 1]
- q-ad-1: Attention to Detail, trueFalse, score 5, weight 1, correct [0]
"""

import pytest
from structlog.testing import capture_logs
from datetime import datetime, timezone
from typing import List, Optional

from aptitude.config import Settings
from aptitude.constants.categories import get_category_code
from aptitude.constants.tiers import (
    get_performance_classification,
    get_tier_from_percentage,
    get_tier_rank,
)
from aptitude.models.assessment import AssessmentInput
from aptitude.models.enumerations import Category, QuestionType
from aptitude.models.question import Answer, Question
from aptitude.models.results import CategoryResult


# =============================================================================
# QUESTION BUILDERS
# =============================================================================

def make_question(
    qid: str = "q-1",
    qtype: QuestionType = QuestionType.MULTIPLE_CHOICE,
    category: Category = Category.LOGICAL_REASONING,
    options: int = 4,
    correct: Optional[List[int]] = None,
    score: float = 10.0,
    weight: float = 1.0,
) -> Question:
    """Build a question with ``options`` numbered answer options."""
    return Question(
        id=qid,
        text=f"Question {qid}",
        type=qtype,
        category=category,
        answers=[Answer(id=i, text=f"Option {i}") for i in range(options)],
        correct_answers=[0] if correct is None else correct,
        score=score,
        weight=weight,
    )


@pytest.fixture
def question_factory():
    """Expose make_question to tests as a fixture."""
    return make_question


@pytest.fixture
def multiple_choice_question():
    return make_question("mc-1", QuestionType.MULTIPLE_CHOICE, correct=[2], score=10.0)


@pytest.fixture
def true_false_question():
    return make_question(
        "tf-1", QuestionType.TRUE_FALSE, Category.ATTENTION_TO_DETAIL,
        options=2, correct=[0], score=5.0,
    )


@pytest.fixture
def multiple_select_question():
    """Two correct answers out of four, worth 15 points."""
    return make_question(
        "ms-1", QuestionType.MULTIPLE_SELECT, Category.MATHEMATICAL_REASONING,
        options=4, correct=[0, 1], score=15.0, weight=2.0,
    )


# =============================================================================
# CATEGORY BUILDERS
# =============================================================================

def make_category(name: Category, percentage: float, weight: float = 1.0) -> CategoryResult:
    """Build a CategoryResult directly from a percentage, as if aggregated."""
    tier = get_tier_from_percentage(percentage)
    return CategoryResult(
        name=name,
        code=get_category_code(name),
        earned_points=percentage,
        max_points=100.0,
        percentage=percentage,
        total_weight=weight,
        weighted_contribution=0.0,
        tier=tier,
        rank=get_tier_rank(tier),
        classification=get_performance_classification(percentage),
        question_count=1,
        correct_count=0,
        partial_credit_count=0,
        incorrect_count=0,
        questions=(),
    )


@pytest.fixture
def category_factory():
    return make_category


# =============================================================================
# ASSESSMENT FIXTURES
# =============================================================================

@pytest.fixture
def sample_questions():
    return [
        make_question("q-lr-1", QuestionType.MULTIPLE_CHOICE, Category.LOGICAL_REASONING,
                      options=4, correct=[1], score=10.0, weight=3.0),
        make_question("q-mr-1", QuestionType.MULTIPLE_SELECT, Category.MATHEMATICAL_REASONING,
                      options=4, correct=[0, 1], score=15.0, weight=2.0),
        make_question("q-ad-1", QuestionType.TRUE_FALSE, Category.ATTENTION_TO_DETAIL,
                      options=2, correct=[0], score=5.0, weight=1.0),
    ]


@pytest.fixture
def sample_input(sample_questions):
    """q-lr-1 correct, q-mr-1 one right + one wrong, q-ad-1 wrong."""
    return AssessmentInput(
        assessment_id="assess-001",
        user_id="user-001",
        questions=sample_questions,
        user_answers={"q-lr-1": [1], "q-mr-1": [0, 2], "q-ad-1": [1]},
        time_spent={"q-lr-1": 30.0, "q-mr-1": 45.5, "q-ad-1": 10.0},
    )


@pytest.fixture
def test_settings():
    """Settings that ignore any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def fixed_clock():
    moment = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
    return lambda: moment


# =============================================================================
# LOG CAPTURE
# =============================================================================

@pytest.fixture
def captured_logs():
    """Capture structlog events emitted during a test."""
    with capture_logs() as logs:
        yield logs
