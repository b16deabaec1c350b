from enum import Enum


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = "multipleChoice"   # single correct answer
    TRUE_FALSE = "trueFalse"             # two options, single correct answer
    MULTIPLE_SELECT = "multipleSelect"   # one or more correct answers, partial credit


class Category(str, Enum):
    PATTERN_RECOGNITION = "Pattern Recognition & Sequences"
    LOGICAL_REASONING = "Logical Reasoning"
    ABSTRACT_THINKING = "Abstract Thinking"
    SYSTEMATIC_PROBLEM_SOLVING = "Systematic Problem-Solving"
    ATTENTION_TO_DETAIL = "Attention to Detail"
    SPATIAL_VISUAL_REASONING = "Spatial & Visual Reasoning"
    MATHEMATICAL_REASONING = "Mathematical Reasoning"
    RULE_APPLICATION = "Rule Application"


class TierRank(str, Enum):
    NOVICE = "Novice"
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class PerformanceClassification(str, Enum):
    EXCEPTIONAL = "exceptional"              # 85-100%
    STRENGTH = "strength"                    # 75-84%
    ADEQUATE = "adequate"                    # 60-74%
    WEAKNESS = "weakness"                    # 45-59%
    CRITICAL_WEAKNESS = "critical-weakness"  # 0-44%


class ImprovementPotential(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ReadinessLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class PerformanceProfile(str, Enum):
    HIGH_PERFORMER = "high-performer"
    BALANCED = "balanced"
    SPECIALIST = "specialist"
    DEVELOPING = "developing"
    EARLY_STAGE = "early-stage"


class InsightPriority(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
