"""
Custom Exceptions - Aptitude Scoring Engine
aptitude/core/exceptions.py

Exception classes raised by the scoring pipeline.
"""

from typing import List


class ScoringException(Exception):
    """Base exception for scoring operations."""

    pass


class QuestionValidationError(ScoringException):
    """Question or submitted answers have an invalid shape."""

    def __init__(self, question_id: str, field: str, message: str):
        self.question_id = question_id
        self.field = field
        self.message = message
        super().__init__(f"Question {question_id or '<missing id>'}: {field}: {message}")


class UnknownQuestionTypeError(ScoringException):
    """Question type outside the supported set."""

    def __init__(self, question_id: str, question_type: object):
        self.question_id = question_id
        self.question_type = question_type
        super().__init__(f"Unknown question type: {question_type!r} (question {question_id})")


class InvalidAssessmentInputError(ScoringException):
    """Assessment input failed pre-scoring validation."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Invalid assessment input:\n" + "\n".join(self.errors))
