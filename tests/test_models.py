# tests/test_models.py

"""
Model Validation Tests - Tests for enumerations, input models and result snapshots
"""

import pytest
from dataclasses import FrozenInstanceError
from pydantic import ValidationError

from aptitude.models.enumerations import (
    Category,
    PerformanceClassification,
    PerformanceProfile,
    QuestionType,
    TierRank,
)
from aptitude.models.question import Answer, Question
from aptitude.models.assessment import AssessmentInput, AssessmentMetadata, ScoringOptions
from aptitude.models.results import PartialCreditDetails, RecommendationSet



# ENUMERATION TESTS


class TestQuestionTypeEnum:
    """Tests for QuestionType enumeration."""

    def test_all_question_types_exist(self):
        """Test the three wire values."""
        actual = [t.value for t in QuestionType]
        assert actual == ["multipleChoice", "trueFalse", "multipleSelect"]

    def test_lookup_by_value(self):
        assert QuestionType("multipleSelect") is QuestionType.MULTIPLE_SELECT


class TestCategoryEnum:
    """Tests for Category enumeration."""

    def test_category_count(self):
        """Test that exactly 8 categories exist."""
        assert len(Category) == 8

    def test_category_names(self):
        assert Category.PATTERN_RECOGNITION.value == "Pattern Recognition & Sequences"
        assert Category.SPATIAL_VISUAL_REASONING.value == "Spatial & Visual Reasoning"


class TestRankAndBandEnums:

    def test_tier_ranks_in_order(self):
        assert [r.value for r in TierRank] == [
            "Novice", "Beginner", "Intermediate", "Advanced", "Expert"
        ]

    def test_classification_values(self):
        assert [c.value for c in PerformanceClassification] == [
            "exceptional", "strength", "adequate", "weakness", "critical-weakness"
        ]

    def test_profile_count(self):
        assert len(PerformanceProfile) == 5



# QUESTION MODEL TESTS


class TestQuestionModel:
    """Tests for Question and Answer models."""

    def test_valid_question(self):
        """Test creating a question from wire-format values."""
        question = Question(
            id="q-1",
            text="Which comes next: 2, 4, 8, ?",
            type="multipleChoice",
            category="Pattern Recognition & Sequences",
            answers=[{"id": 0, "text": "10"}, {"id": 1, "text": "16"}],
            correct_answers=[1],
            score=10,
        )
        assert question.type == QuestionType.MULTIPLE_CHOICE
        assert question.category == Category.PATTERN_RECOGNITION
        assert question.weight == 1.0
        assert question.answers[1].text == "16"

    def test_unknown_type_rejected(self):
        """Test that the model rejects types outside the enum."""
        with pytest.raises(ValidationError):
            Question(id="q", type="essay", category="Logical Reasoning", score=1)

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            Question(id="q", type="trueFalse", category="Astrology", score=1)

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            Question(id="q", type="trueFalse", category="Logical Reasoning", score=1, weight=-1)

    @pytest.mark.parametrize("field", ["score", "weight"])
    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_numbers_rejected(self, field, value):
        """Test that NaN and infinity are refused for score and weight."""
        data = {"id": "q", "type": "trueFalse", "category": "Logical Reasoning", "score": 1}
        data[field] = value
        with pytest.raises(ValidationError):
            Question(**data)

    def test_shape_not_checked_at_construction(self):
        """Out-of-range correct answers are a scoring error, not a model error."""
        question = Question(
            id="q", type="trueFalse", category="Logical Reasoning",
            answers=[Answer(id=0)], correct_answers=[5], score=1,
        )
        assert question.correct_answers == [5]

    def test_negative_answer_id_rejected(self):
        with pytest.raises(ValidationError):
            Answer(id=-1, text="x")



# ASSESSMENT MODEL TESTS


class TestAssessmentInput:

    def test_defaults(self):
        assessment = AssessmentInput()
        assert assessment.assessment_id == ""
        assert assessment.questions == []
        assert assessment.user_answers is None
        assert assessment.time_spent is None

    def test_answer_map(self, sample_input):
        assert sample_input.user_answers["q-mr-1"] == [0, 2]
        assert sample_input.time_spent["q-lr-1"] == 30.0

    def test_negative_time_spent_rejected(self):
        with pytest.raises(ValidationError):
            AssessmentInput(user_id="u", time_spent={"q-1": -5.0})

    def test_zero_time_spent_allowed(self):
        assert AssessmentInput(time_spent={"q-1": 0}).time_spent == {"q-1": 0.0}

    def test_options_default_to_unset(self):
        options = ScoringOptions()
        assert options.include_analysis is None
        assert options.include_recommendations is None
        assert options.version is None


class TestResultObjects:

    def test_metadata_frozen(self):
        metadata = AssessmentMetadata(total_questions=1, questions_answered=1, version="1.0")
        with pytest.raises(ValidationError):
            metadata.version = "2.0"

    def test_metadata_rejects_negative_counts(self):
        with pytest.raises(ValidationError):
            AssessmentMetadata(total_questions=-1, questions_answered=0, version="1.0")

    def test_result_dataclasses_frozen(self):
        details = PartialCreditDetails(1, 0, 1, 0.5, 1.0)
        with pytest.raises(FrozenInstanceError):
            details.correct_selections = 2

    def test_empty_recommendation_set(self):
        recommendations = RecommendationSet()
        assert recommendations.career_paths == ()
        assert recommendations.role_suitability.readiness_level.value == "medium"
