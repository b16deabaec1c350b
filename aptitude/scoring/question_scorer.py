# aptitude/scoring/question_scorer.py
"""
Question Scorer
-------------------------------
Grades one question against a submitted answer set.

Single-correct (multipleChoice, trueFalse) questions are all-or-nothing.
Multi-correct (multipleSelect) questions earn proportional partial credit:

    correct_ratio  = correct_selections / |correct|
    penalty_factor = max(0, 1 − incorrect_selections / |correct|)
    earned         = score × correct_ratio × penalty_factor

Worked table for |correct| = 2, score = 15:

    selected (correct, wrong) | ratio | penalty | earned
    ──────────────────────────┼───────┼─────────┼───────
    (2, 0)                    | 1.0   | 1.0     | 15.0
    (1, 0)                    | 0.5   | 1.0     | 7.5
    (2, 1)                    | 1.0   | 0.5     | 7.5
    (1, 1)                    | 0.5   | 0.5     | 3.75
    (0, 2)                    | 0.0   | 0.0     | 0.0
"""
import math
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

import structlog

from aptitude.core.exceptions import QuestionValidationError, UnknownQuestionTypeError
from aptitude.models.enumerations import QuestionType
from aptitude.models.question import Question
from aptitude.models.results import PartialCreditDetails, QuestionResult
from aptitude.scoring.utils import safe_percentage

logger = structlog.get_logger(__name__)

# (earned_points, is_correct, partial-credit payload)
GradeOutcome = Tuple[float, bool, Optional[PartialCreditDetails]]


def _grade_single_correct(question: Question, user_answers: Sequence[int]) -> GradeOutcome:
    """All-or-nothing: exactly one submission equal to the single correct index."""
    is_correct = (
        len(user_answers) == 1
        and len(question.correct_answers) == 1
        and user_answers[0] == question.correct_answers[0]
    )
    earned = float(question.score) if is_correct else 0.0
    return earned, is_correct, None


def _grade_multiple_select(question: Question, user_answers: Sequence[int]) -> GradeOutcome:
    """Proportional partial credit with a penalty for wrong selections."""
    correct_set = set(question.correct_answers)
    selected = set(user_answers)

    correct_selections = len(selected & correct_set)
    incorrect_selections = len(selected - correct_set)
    total_correct = len(correct_set)
    missed_selections = total_correct - correct_selections

    if total_correct > 0:
        correct_ratio = correct_selections / total_correct
        penalty_factor = max(0.0, 1 - incorrect_selections / total_correct)
    else:
        correct_ratio = 0.0
        penalty_factor = 0.0

    earned = float(question.score) * correct_ratio * penalty_factor
    is_correct = correct_selections == total_correct and incorrect_selections == 0

    details = PartialCreditDetails(
        correct_selections=correct_selections,
        incorrect_selections=incorrect_selections,
        missed_selections=missed_selections,
        correct_ratio=correct_ratio,
        penalty_factor=penalty_factor,
    )
    return earned, is_correct, details


# Closed dispatch table: one grader per QuestionType member
_GRADERS: Mapping[QuestionType, Callable[[Question, Sequence[int]], GradeOutcome]] = MappingProxyType({
    QuestionType.MULTIPLE_CHOICE: _grade_single_correct,
    QuestionType.TRUE_FALSE:      _grade_single_correct,
    QuestionType.MULTIPLE_SELECT: _grade_multiple_select,
})

_missing = set(QuestionType) - set(_GRADERS)
if _missing:
    raise RuntimeError(f"No grader registered for question types: {sorted(t.value for t in _missing)}")


class QuestionScorer:
    """Grade individual questions."""

    def score(
        self,
        question: Question,
        user_answers: Sequence[int],
        time_spent: Optional[float] = None,
    ) -> QuestionResult:
        """
        Score a single question.

        Args:
            question: The question being graded.
            user_answers: Option indices selected by the candidate. Empty means
                          unanswered and is graded as incorrect.
            time_spent: Optional seconds spent on the question.

        Returns:
            QuestionResult with earned points, percentage and status flags.

        Raises:
            QuestionValidationError: malformed question or out-of-range index.
            UnknownQuestionTypeError: type outside QuestionType.

        Examples:
            >>> result = QuestionScorer().score(multi_select_q, [0, 2])  # 1 right, 1 wrong of 2
            >>> result.earned_points
            3.75
        """
        answers = list(user_answers)
        self.validate(question, answers)

        grader = _GRADERS.get(question.type)
        if grader is None:
            raise UnknownQuestionTypeError(question.id, question.type)

        qtype = QuestionType(question.type)
        earned, is_correct, details = grader(question, answers)

        if qtype == QuestionType.MULTIPLE_SELECT:
            is_partial = 0 < earned < question.score
        else:
            is_partial = False

        percentage = safe_percentage(earned, question.score)

        logger.debug(
            "question_scored",
            question_id=question.id,
            question_type=qtype.value,
            earned_points=earned,
            max_points=float(question.score),
            is_correct=is_correct,
            is_partial_credit=is_partial,
        )

        return QuestionResult(
            question_id=question.id,
            category=question.category,
            type=qtype,
            user_answers=tuple(answers),
            correct_answers=tuple(question.correct_answers),
            earned_points=earned,
            max_points=float(question.score),
            percentage=percentage,
            is_correct=is_correct,
            is_partial_credit=is_partial,
            weight=float(question.weight),
            partial_credit=details,
            time_spent=time_spent,
        )

    def validate(self, question: Question, user_answers: Sequence[int]) -> None:
        """Check question shape and answer indices; raise on the first violation."""
        qid = question.id
        if not qid:
            raise QuestionValidationError("", "id", "question must have an id")
        if not question.type:
            raise QuestionValidationError(qid, "type", "question must have a type")
        if not question.correct_answers:
            raise QuestionValidationError(qid, "correct_answers", "must have correct answers")
        if (
            not isinstance(question.score, (int, float))
            or not math.isfinite(question.score)
            or question.score < 0
        ):
            raise QuestionValidationError(qid, "score", "must have a valid non-negative score")
        if not isinstance(question.weight, (int, float)) or not math.isfinite(question.weight):
            raise QuestionValidationError(qid, "weight", "must have a finite weight")
        if not question.answers:
            raise QuestionValidationError(qid, "answers", "must have answers")

        max_index = len(question.answers) - 1
        for answer in user_answers:
            if answer < 0 or answer > max_index:
                raise QuestionValidationError(
                    qid, "user_answers",
                    f"invalid answer index {answer}, valid range is 0-{max_index}",
                )
        for answer in question.correct_answers:
            if answer < 0 or answer > max_index:
                raise QuestionValidationError(
                    qid, "correct_answers",
                    f"invalid correct answer index {answer}, valid range is 0-{max_index}",
                )

        option_count = len(question.answers)
        correct_count = len(question.correct_answers)

        if question.type == QuestionType.TRUE_FALSE:
            if option_count != 2:
                raise QuestionValidationError(qid, "answers", "true/false question must have exactly 2 answers")
            if correct_count != 1:
                raise QuestionValidationError(qid, "correct_answers", "true/false question must have exactly 1 correct answer")
        elif question.type == QuestionType.MULTIPLE_CHOICE:
            if option_count < 2:
                raise QuestionValidationError(qid, "answers", "multiple choice question must have at least 2 answers")
            if correct_count != 1:
                raise QuestionValidationError(qid, "correct_answers", "multiple choice question must have exactly 1 correct answer")
        elif question.type == QuestionType.MULTIPLE_SELECT:
            if option_count < 2:
                raise QuestionValidationError(qid, "answers", "multiple select question must have at least 2 answers")
            if correct_count < 1:
                raise QuestionValidationError(qid, "correct_answers", "multiple select question must have at least 1 correct answer")

    def score_all(
        self,
        questions: Sequence[Question],
        user_answers: Mapping[str, Sequence[int]],
        time_spent: Optional[Mapping[str, float]] = None,
    ) -> List[QuestionResult]:
        """
        Score every question in order. Missing answers are empty submissions.
        The first malformed question aborts the whole batch.
        """
        time_spent = time_spent or {}
        return [
            self.score(q, user_answers.get(q.id, []), time_spent.get(q.id))
            for q in questions
        ]


def calculate_total_points(results: Sequence[QuestionResult]) -> Tuple[float, float, float]:
    """Raw (earned, max, percentage) over a set of question results."""
    earned = sum(r.earned_points for r in results)
    max_points = sum(r.max_points for r in results)
    return earned, max_points, safe_percentage(earned, max_points)


def get_question_stats(results: Sequence[QuestionResult]) -> Dict[str, float]:
    """Counts of fully correct / partial / incorrect results plus the raw percentage."""
    correct = sum(1 for r in results if r.is_correct)
    partial = sum(1 for r in results if not r.is_correct and r.is_partial_credit)
    _, _, average_score = calculate_total_points(results)
    return {
        "total": len(results),
        "correct": correct,
        "partial": partial,
        "incorrect": len(results) - correct - partial,
        "average_score": average_score,
    }
