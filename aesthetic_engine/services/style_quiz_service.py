"""Quiz orchestration: validate answers, score them and resolve aesthetics."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

from pydantic import ValidationError

from aesthetic_engine.catalog.base import AestheticCatalog
from aesthetic_engine.config.settings import get_settings
from aesthetic_engine.domain.aesthetic import Aesthetic
from aesthetic_engine.domain.aesthetic_score import round_half_up
from aesthetic_engine.domain.exceptions import EmptyResultSetError, InvalidAnswersError
from aesthetic_engine.metrics.prometheus_exporter import (
    quiz_submissions_total,
    quiz_unresolved_slugs_total,
)
from aesthetic_engine.quiz.question_bank import build_default_quiz
from aesthetic_engine.quiz.schemas import AestheticResultSummary, QuizAnswer, QuizSubmissionResult
from aesthetic_engine.quiz.style_quiz import StyleQuiz

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DetailedQuizResult:
    """Quiz-ranked slug resolved to a catalog aesthetic."""

    aesthetic: Aesthetic
    score: int
    percentage: float

    def to_summary(self) -> AestheticResultSummary:
        return AestheticResultSummary(
            id=self.aesthetic.id,
            name=self.aesthetic.name,
            description=self.aesthetic.description,
            image_url=self.aesthetic.image_url,
            score=self.score,
            percentage=round_half_up(self.percentage, 1),
        )


def coerce_answers(raw_answers: Iterable[QuizAnswer | Mapping[str, Any]] | None) -> list[QuizAnswer]:
    """Turn raw answer payloads into ``QuizAnswer`` models."""

    if raw_answers is None:
        raise InvalidAnswersError("Quiz answers are required")

    answers: list[QuizAnswer] = []
    for raw in raw_answers:
        if isinstance(raw, QuizAnswer):
            answers.append(raw)
            continue
        try:
            answers.append(QuizAnswer.model_validate(raw))
        except ValidationError as exc:
            raise InvalidAnswersError(f"Malformed quiz answer: {raw!r}") from exc
    return answers


class StyleQuizService:
    """Runs the style quiz against the aesthetic catalog."""

    def __init__(
        self,
        catalog: AestheticCatalog,
        *,
        quiz_factory: Callable[[], StyleQuiz] = build_default_quiz,
        detail_limit: int | None = None,
        alternative_count: int | None = None,
    ) -> None:
        settings = get_settings()
        self._catalog = catalog
        self._quiz_factory = quiz_factory
        self._detail_limit = settings.quiz_detail_limit if detail_limit is None else detail_limit
        self._alternative_count = (
            settings.quiz_alternative_count if alternative_count is None else alternative_count
        )

    def get_quiz_questions(self) -> dict[str, Any]:
        """Return the quiz id and its question bank."""

        return self._quiz_factory().to_dict()

    def calculate_user_aesthetic(
        self,
        answers: Iterable[QuizAnswer | Mapping[str, Any]],
    ) -> str:
        """Return the slug of the best-scoring aesthetic without touching the catalog."""

        quiz = self._quiz_factory()
        results = quiz.calculate_results(coerce_answers(answers))
        if not results:
            raise EmptyResultSetError("Unable to calculate aesthetic from answers")
        return results[0].aesthetic_slug

    async def get_detailed_results(
        self,
        quiz: StyleQuiz,
        answers: list[QuizAnswer],
    ) -> list[DetailedQuizResult]:
        """
        Resolve the top-ranked slugs against the catalog.

        Lookups run concurrently; the output keeps rank order. Slugs the
        catalog does not know are dropped and reported via logs and metrics.
        """

        ranked = quiz.calculate_results(answers)[: self._detail_limit]
        aesthetics = await asyncio.gather(
            *(self._catalog.find_by_name(result.aesthetic_slug) for result in ranked)
        )

        detailed: list[DetailedQuizResult] = []
        for result, aesthetic in zip(ranked, aesthetics):
            if aesthetic is None:
                logger.warning("Quiz aesthetic %r is missing from the catalog", result.aesthetic_slug)
                quiz_unresolved_slugs_total.inc()
                continue
            detailed.append(
                DetailedQuizResult(
                    aesthetic=aesthetic,
                    score=result.score,
                    percentage=result.percentage,
                )
            )
        return detailed

    async def submit_quiz(
        self,
        answers: Iterable[QuizAnswer | Mapping[str, Any]],
    ) -> QuizSubmissionResult:
        """Score a full answer set and return the top aesthetic plus alternatives."""

        quiz = self._quiz_factory()
        try:
            results = await self.get_detailed_results(quiz, coerce_answers(answers))
        except InvalidAnswersError as exc:
            logger.warning("Rejected quiz submission: %s", exc)
            quiz_submissions_total.labels(outcome="invalid_answers").inc()
            raise

        if not results:
            quiz_submissions_total.labels(outcome="empty_result").inc()
            raise EmptyResultSetError(
                "Unable to calculate quiz results: no ranked aesthetic exists in the catalog"
            )

        top, alternatives = results[0], results[1 : 1 + self._alternative_count]
        logger.info("Quiz %s resolved to aesthetic %r", quiz.id, top.aesthetic.name)
        quiz_submissions_total.labels(outcome="ok").inc()
        return QuizSubmissionResult(
            top_aesthetic=top.to_summary(),
            alternative_aesthetics=[result.to_summary() for result in alternatives],
        )
