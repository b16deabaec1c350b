"""
Category Constants
aptitude/constants/categories.py

The 8 cognitive skill areas covered by the assessment. Tables are built once
at import time and exposed read-only.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from aptitude.models.enumerations import Category


@dataclass(frozen=True)
class CategoryDefinition:
    """Static metadata for one assessment category."""
    category: Category
    code: str                 # snake_case identifier
    description: str
    skills: Tuple[str, ...]


# ---------------------------------------------------------------------------
# Category table
#
# Category                          | Code
# ──────────────────────────────────┼─────────────────────────────
# Pattern Recognition & Sequences   | pattern_recognition
# Logical Reasoning                 | logical_reasoning
# Abstract Thinking                 | abstract_thinking
# Systematic Problem-Solving        | systematic_problem_solving
# Attention to Detail               | attention_to_detail
# Spatial & Visual Reasoning        | spatial_visual_reasoning
# Mathematical Reasoning            | mathematical_reasoning
# Rule Application                  | rule_application
# ---------------------------------------------------------------------------

CATEGORY_DEFINITIONS: Mapping[Category, CategoryDefinition] = MappingProxyType({
    Category.PATTERN_RECOGNITION: CategoryDefinition(
        category=Category.PATTERN_RECOGNITION,
        code="pattern_recognition",
        description="Ability to identify patterns in numbers, shapes, or symbols and predict sequences",
        skills=(
            "Identifying patterns in data",
            "Predicting next elements in sequences",
            "Finding pattern breaks",
            "Analogical reasoning",
        ),
    ),
    Category.LOGICAL_REASONING: CategoryDefinition(
        category=Category.LOGICAL_REASONING,
        code="logical_reasoning",
        description="Capacity for logical thinking, deduction, and working with conditional statements",
        skills=(
            "Conditional logic (if-then)",
            "Boolean logic (AND, OR, NOT)",
            "Cause and effect analysis",
            "Logical deduction",
            "Valid vs invalid conclusions",
        ),
    ),
    Category.ABSTRACT_THINKING: CategoryDefinition(
        category=Category.ABSTRACT_THINKING,
        code="abstract_thinking",
        description="Ability to work with symbolic representations and understand abstract concepts",
        skills=(
            "Working with symbols",
            "Translating between representations",
            "Understanding abstract relationships",
            "Generalization from examples",
        ),
    ),
    Category.SYSTEMATIC_PROBLEM_SOLVING: CategoryDefinition(
        category=Category.SYSTEMATIC_PROBLEM_SOLVING,
        code="systematic_problem_solving",
        description="Skill in breaking down complex problems and following structured approaches",
        skills=(
            "Breaking problems into steps",
            "Following multi-step instructions",
            "Creating procedures",
            "Ordering operations correctly",
        ),
    ),
    Category.ATTENTION_TO_DETAIL: CategoryDefinition(
        category=Category.ATTENTION_TO_DETAIL,
        code="attention_to_detail",
        description="Precision in following rules, spotting differences, and detecting inconsistencies",
        skills=(
            "Spotting differences",
            "Following precise rules",
            "Identifying missing elements",
            "Detecting inconsistencies",
        ),
    ),
    Category.SPATIAL_VISUAL_REASONING: CategoryDefinition(
        category=Category.SPATIAL_VISUAL_REASONING,
        code="spatial_visual_reasoning",
        description="Capacity for mental rotation, visualization, and understanding spatial relationships",
        skills=(
            "Mental rotation",
            "Flow diagram comprehension",
            "Understanding hierarchies",
            "Grid-based problem solving",
        ),
    ),
    Category.MATHEMATICAL_REASONING: CategoryDefinition(
        category=Category.MATHEMATICAL_REASONING,
        code="mathematical_reasoning",
        description="Basic mathematical thinking including algebra, order of operations, and proportions",
        skills=(
            "Order of operations",
            "Basic algebra",
            "Set theory concepts",
            "Proportional reasoning",
        ),
    ),
    Category.RULE_APPLICATION: CategoryDefinition(
        category=Category.RULE_APPLICATION,
        code="rule_application",
        description="Ability to apply rules to new situations and work within constraints",
        skills=(
            "Applying rules to new situations",
            "Identifying rule conflicts",
            "Understanding precedence",
            "Working within constraints",
        ),
    ),
})

_CODE_TO_CATEGORY: Mapping[str, Category] = MappingProxyType(
    {d.code: d.category for d in CATEGORY_DEFINITIONS.values()}
)


def get_category_definition(category: Category) -> CategoryDefinition:
    """Get the static definition for a category."""
    return CATEGORY_DEFINITIONS[Category(category)]


def get_category_code(category: Category) -> str:
    """
    Get the snake_case code for a category.

    Examples:
        >>> get_category_code(Category.LOGICAL_REASONING)
        'logical_reasoning'
    """
    return CATEGORY_DEFINITIONS[Category(category)].code


def get_category_by_code(code: str) -> Optional[Category]:
    """Reverse lookup from code; None if the code is unknown."""
    return _CODE_TO_CATEGORY.get(code.lower().strip())
