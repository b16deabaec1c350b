from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat
from typing import Dict, List, Optional

from aptitude.models.question import Question
from aptitude.models.results import (
    CategoryResult,
    OverallResult,
    PerformanceAnalysis,
    QuestionResult,
    RecommendationSet,
)


class AssessmentInput(BaseModel):
    """
    Input for scoring one candidate's assessment.

    Identifiers and the answer map are optional at the model level so that
    validate_assessment_input() can report each gap as its own error.
    """

    assessment_id: str = Field(default="", description="Assessment identifier")
    user_id: str = Field(default="", description="Candidate identifier")
    questions: List[Question] = Field(default_factory=list)
    user_answers: Optional[Dict[str, List[int]]] = Field(
        default=None,
        description="Question id → selected option indices"
    )
    time_spent: Optional[Dict[str, NonNegativeFloat]] = Field(
        default=None,
        description="Question id → seconds spent"
    )


class ScoringOptions(BaseModel):
    """
    Per-call scoring switches. None falls back to Settings.
    """

    include_analysis: Optional[bool] = None
    include_recommendations: Optional[bool] = None
    version: Optional[str] = None


class AssessmentMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_questions: int = Field(..., ge=0)
    questions_answered: int = Field(..., ge=0)
    time_spent: float = Field(default=0.0, ge=0, description="Total seconds")
    version: str


class AssessmentResult(BaseModel):
    """
    Complete, immutable scoring snapshot. ``completed_at`` is the only field
    that differs between two runs over the same input.
    """

    model_config = ConfigDict(frozen=True)

    assessment_id: str
    user_id: str
    completed_at: str = Field(..., description="Completion timestamp (ISO 8601, UTC)")
    overall: OverallResult
    categories: List[CategoryResult]
    questions: List[QuestionResult]
    analysis: PerformanceAnalysis
    recommendations: RecommendationSet
    metadata: AssessmentMetadata
