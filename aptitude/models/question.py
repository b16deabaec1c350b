from pydantic import BaseModel, Field
from typing import List

from aptitude.models.enumerations import Category, QuestionType


class Answer(BaseModel):
    """
    One answer option of a question.
    """

    id: int = Field(..., ge=0, description="0-based index of this option")
    text: str = Field(default="", description="Option text shown to the candidate")


class Question(BaseModel):
    """
    A single assessment question.

    Shape rules (option counts, correct-answer counts, index ranges) are
    enforced when the question is scored, so that the failure names the
    question id and the offending field.
    """

    id: str = Field(..., description="Unique question identifier")
    text: str = Field(default="", description="Question text presented to the candidate")
    type: QuestionType = Field(..., description="multipleChoice, trueFalse or multipleSelect")
    category: Category = Field(..., description="Assessment category")
    answers: List[Answer] = Field(default_factory=list, description="Ordered answer options")
    correct_answers: List[int] = Field(
        default_factory=list,
        description="Indices of the correct option(s)"
    )
    score: float = Field(..., allow_inf_nan=False, description="Base points for a fully correct answer")
    weight: float = Field(default=1.0, ge=0, allow_inf_nan=False, description="Question weight (typically 1-5)")
