"""
scoring/integration_service.py

Full pipeline: questions + answers → AssessmentResult.

Class: AssessmentScoringService
Method: score_assessment(assessment_input, options) → AssessmentResult

Pipeline steps:
  1. QuestionScorer        → question results (missing answers = empty submission)
  2. CategoryAggregator    → category results (pass 1)
  3. weighted contributions (pass 2)
  4. OverallScorer         → overall result
  5. metadata
  6. PerformanceAnalyzer   → analysis (or empty analysis)
  7. external recommender  → recommendations (or empty set)
  8. Build the immutable result snapshot
"""

from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence, Tuple

import structlog

from aptitude.analysis.performance_analyzer import PerformanceAnalyzer, empty_analysis
from aptitude.config import Settings, get_settings
from aptitude.core.exceptions import InvalidAssessmentInputError
from aptitude.models.assessment import (
    AssessmentInput,
    AssessmentMetadata,
    AssessmentResult,
    ScoringOptions,
)
from aptitude.models.results import (
    CategoryResult,
    OverallResult,
    PerformanceAnalysis,
    QuestionResult,
    RecommendationSet,
)
from aptitude.scoring.category_scorer import CategoryAggregator
from aptitude.scoring.overall_scorer import OverallScorer
from aptitude.scoring.question_scorer import QuestionScorer

logger = structlog.get_logger(__name__)

Recommender = Callable[
    [Sequence[CategoryResult], OverallResult, PerformanceAnalysis],
    RecommendationSet,
]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def validate_assessment_input(assessment_input: AssessmentInput) -> Tuple[bool, List[str]]:
    """
    Check an assessment input before scoring.

    Returns:
        (valid, errors) with one error string per problem found.
    """
    errors: List[str] = []

    if not assessment_input.assessment_id:
        errors.append("Assessment ID is required")
    if not assessment_input.user_id:
        errors.append("User ID is required")
    if not assessment_input.questions:
        errors.append("At least one question is required")
    if assessment_input.user_answers is None:
        errors.append("User answers are required")

    if assessment_input.questions and assessment_input.user_answers is not None:
        answered = set(assessment_input.user_answers)
        seen = set()
        for question in assessment_input.questions:
            if question.id in seen:
                continue
            seen.add(question.id)
            if question.id not in answered:
                errors.append(f"Missing answer for question: {question.id}")

    return len(errors) == 0, errors


class AssessmentScoringService:
    """Run the full scoring pipeline for one assessment."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        recommender: Optional[Recommender] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.settings = settings or get_settings()
        self.recommender = recommender
        self.clock = clock

        self.question_scorer = QuestionScorer()
        self.category_aggregator = CategoryAggregator()
        self.overall_scorer = OverallScorer()
        self.performance_analyzer = PerformanceAnalyzer()

    # ------------------------------------------------------------------
    # Main pipeline
    # ------------------------------------------------------------------

    def score_assessment(
        self,
        assessment_input: AssessmentInput,
        options: Optional[ScoringOptions] = None,
    ) -> AssessmentResult:
        """
        Score a complete assessment.

        Args:
            assessment_input: Questions, answers and optional timings.
            options: Per-call switches; unset fields fall back to Settings.

        Returns:
            AssessmentResult snapshot. Identical inputs give identical results
            apart from ``completed_at``.

        Raises:
            QuestionValidationError / UnknownQuestionTypeError on the first
            malformed question; no partial result is returned.
        """
        options = options or ScoringOptions()
        include_analysis = self._resolve(options.include_analysis, self.settings.INCLUDE_ANALYSIS)
        include_recommendations = self._resolve(
            options.include_recommendations, self.settings.INCLUDE_RECOMMENDATIONS
        )
        version = options.version or self.settings.SCORING_VERSION

        user_answers = assessment_input.user_answers or {}
        time_spent = assessment_input.time_spent or {}

        # 1. Question results
        question_results = self.question_scorer.score_all(
            assessment_input.questions, user_answers, time_spent
        )

        # 2-3. Category results, then weighted contributions
        category_results = self.category_aggregator.aggregate(question_results)
        category_results = self.category_aggregator.apply_weighted_contributions(category_results)

        # 4. Overall
        overall = self.overall_scorer.compute_overall(category_results)

        # 5. Metadata
        metadata = self._build_metadata(assessment_input, version)

        # 6. Analysis
        if include_analysis:
            analysis = self.performance_analyzer.analyze(category_results, overall)
        else:
            analysis = empty_analysis()

        # 7. Recommendations
        if include_recommendations and self.recommender is not None:
            recommendations = self.recommender(category_results, overall, analysis)
        else:
            recommendations = RecommendationSet()

        result = AssessmentResult(
            assessment_id=assessment_input.assessment_id,
            user_id=assessment_input.user_id,
            completed_at=self.clock().isoformat(),
            overall=overall,
            categories=category_results,
            questions=question_results,
            analysis=analysis,
            recommendations=recommendations,
            metadata=metadata,
        )

        logger.info(
            "assessment_scored",
            assessment_id=assessment_input.assessment_id,
            user_id=assessment_input.user_id,
            question_count=len(question_results),
            category_count=len(category_results),
            overall_percentage=round(overall.percentage, 4),
            tier=overall.tier,
            rank=overall.rank.value,
            include_analysis=include_analysis,
            include_recommendations=include_recommendations,
            version=version,
        )
        return result

    def score_assessment_with_validation(
        self,
        assessment_input: AssessmentInput,
        options: Optional[ScoringOptions] = None,
    ) -> AssessmentResult:
        """Validate first; raise InvalidAssessmentInputError listing every problem."""
        valid, errors = validate_assessment_input(assessment_input)
        if not valid:
            logger.warning(
                "assessment_input_invalid",
                assessment_id=assessment_input.assessment_id,
                errors=errors,
            )
            raise InvalidAssessmentInputError(errors)
        return self.score_assessment(assessment_input, options)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve(value: Optional[bool], default: bool) -> bool:
        return default if value is None else value

    @staticmethod
    def _build_metadata(assessment_input: AssessmentInput, version: str) -> AssessmentMetadata:
        answers = assessment_input.user_answers or {}
        timings = assessment_input.time_spent or {}
        return AssessmentMetadata(
            total_questions=len(assessment_input.questions),
            questions_answered=len(answers),
            time_spent=float(sum(timings.values())),
            version=version,
        )


def score_assessment(
    assessment_input: AssessmentInput,
    options: Optional[ScoringOptions] = None,
    recommender: Optional[Recommender] = None,
) -> AssessmentResult:
    """Module-level shortcut for AssessmentScoringService().score_assessment()."""
    return AssessmentScoringService(recommender=recommender).score_assessment(
        assessment_input, options
    )
