"""Pydantic models for quiz submissions and results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class QuizAnswer(_CamelModel):
    """Single answer: the option picked for one question."""

    question_id: str = Field(min_length=1)
    option_id: str = Field(min_length=1)


class AestheticResultSummary(_CamelModel):
    """Resolved aesthetic together with its quiz score."""

    id: str
    name: str
    description: str
    image_url: str | None = None
    score: int
    percentage: float


class QuizSubmissionResult(_CamelModel):
    """Outcome of a quiz submission returned to the caller."""

    top_aesthetic: AestheticResultSummary
    alternative_aesthetics: list[AestheticResultSummary]
