"""Assessment Schemas — sections, questions, validation rules and conditional logic.

Invariants:
    - Question.type restricted to the closed QuestionType set
    - Validation bounds are ordered (min <= max) when both are given
    - conditional_logic.depends_on_question_id references another question of the
      SAME assessment (never itself, never a question elsewhere)

Design Decisions:
    - Cross-question rule checked by a model_validator on the whole tree: the
      builder saves the entire assessment at once
    - Question/section ids optional: the record factories generate missing ones
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from talentflow.core.domain_types import ConditionOperator, QuestionType


class QuestionValidation(BaseModel):
    model_config = ConfigDict(extra="allow")

    min_length: int | None = Field(None, ge=0)
    max_length: int | None = Field(None, ge=0)
    min_value: float | None = None
    max_value: float | None = None
    pattern: str | None = None

    @model_validator(mode="after")
    def check_bounds(self):
        if (
            self.min_length is not None and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise ValueError("min_length cannot exceed max_length")
        if (
            self.min_value is not None and self.max_value is not None
            and self.min_value > self.max_value
        ):
            raise ValueError("min_value cannot exceed max_value")
        return self


class ConditionalLogic(BaseModel):
    depends_on_question_id: str = Field(min_length=1)
    operator: ConditionOperator = ConditionOperator.EQUALS
    value: Any = None


class QuestionSchema(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    type: QuestionType = QuestionType.SHORT_TEXT
    title: str = Field("", max_length=500)
    description: str | None = None
    required: bool | None = None
    options: list[str] | None = None
    validation: QuestionValidation | None = None
    conditional_logic: ConditionalLogic | None = None


class SectionSchema(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    title: str = Field("", max_length=200)
    description: str | None = None
    questions: list[QuestionSchema] = Field(default_factory=list)


def _check_conditional_logic(sections: list[SectionSchema] | None) -> None:
    questions = [q for s in sections or [] for q in s.questions]
    known_ids = {q.id for q in questions if q.id}
    for question in questions:
        logic = question.conditional_logic
        if logic is None:
            continue
        if question.id and logic.depends_on_question_id == question.id:
            raise ValueError(f"question '{question.id}' cannot depend on itself")
        if logic.depends_on_question_id not in known_ids:
            raise ValueError(
                f"conditional logic references unknown question "
                f"'{logic.depends_on_question_id}'",
            )


class AssessmentCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    job_id: str = Field(min_length=1)
    title: str = Field("", max_length=200)
    description: str | None = None
    sections: list[SectionSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_conditional_logic(self):
        _check_conditional_logic(self.sections)
        return self


class AssessmentUpdate(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str | None = Field(None, max_length=200)
    description: str | None = None
    sections: list[SectionSchema] | None = None

    @model_validator(mode="after")
    def validate_conditional_logic(self):
        _check_conditional_logic(self.sections)
        return self
