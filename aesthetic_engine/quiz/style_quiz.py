"""Style quiz entity and weighted-vote scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from aesthetic_engine.domain.exceptions import InvalidAnswersError
from aesthetic_engine.domain.slugs import AestheticSlug
from aesthetic_engine.quiz.schemas import QuizAnswer


@dataclass(frozen=True, slots=True)
class QuizOption:
    """Answer option carrying a weight per aesthetic slug."""

    id: str
    text: str
    weights: Mapping[AestheticSlug, int]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "weights": {slug.value: weight for slug, weight in self.weights.items()},
        }


@dataclass(frozen=True, slots=True)
class QuizQuestion:
    """Question with its ordered options."""

    id: str
    text: str
    options: tuple[QuizOption, ...]

    def find_option(self, option_id: str) -> QuizOption | None:
        for option in self.options:
            if option.id == option_id:
                return option
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "options": [option.to_dict() for option in self.options],
        }


@dataclass(frozen=True, slots=True)
class QuizResult:
    """Accumulated weight for one aesthetic slug."""

    aesthetic_slug: str
    score: int
    percentage: float


class StyleQuiz:
    """Fixed questionnaire; stateless apart from its id and question list."""

    def __init__(self, id: str, questions: Sequence[QuizQuestion]) -> None:
        self._id = id
        self._questions = tuple(questions)
        self._by_id = {question.id: question for question in self._questions}

    @classmethod
    def create(cls, id: str, questions: Sequence[QuizQuestion]) -> "StyleQuiz":
        if not questions:
            raise ValueError("Quiz must have at least one question")
        return cls(id, questions)

    @property
    def id(self) -> str:
        return self._id

    @property
    def questions(self) -> tuple[QuizQuestion, ...]:
        return self._questions

    def validate_answers(self, answers: Sequence[QuizAnswer]) -> bool:
        """Return ``True`` when ``answers`` hold exactly one valid answer per question."""

        try:
            self._resolve_options(answers)
        except InvalidAnswersError:
            return False
        return True

    def calculate_results(self, answers: Sequence[QuizAnswer]) -> list[QuizResult]:
        """
        Sum option weights per aesthetic and rank them.

        Results are ordered by score, highest first. Slugs with equal scores
        keep the order in which they were first encountered.
        """

        options = self._resolve_options(answers)

        totals: dict[str, int] = {}
        for option in options:
            for slug, weight in option.weights.items():
                totals[slug.value] = totals.get(slug.value, 0) + weight

        grand_total = sum(totals.values())
        results = [
            QuizResult(
                aesthetic_slug=slug,
                score=score,
                percentage=(score / grand_total * 100) if grand_total > 0 else 0.0,
            )
            for slug, score in totals.items()
        ]
        return sorted(results, key=lambda result: result.score, reverse=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self._id,
            "questions": [question.to_dict() for question in self._questions],
        }

    def _resolve_options(self, answers: Sequence[QuizAnswer]) -> list[QuizOption]:
        if len(answers) != len(self._questions):
            raise InvalidAnswersError(
                f"All questions must be answered: expected {len(self._questions)} answers, "
                f"got {len(answers)}"
            )

        seen: set[str] = set()
        options: list[QuizOption] = []
        for answer in answers:
            question = self._by_id.get(answer.question_id)
            if question is None:
                raise InvalidAnswersError(f"Question {answer.question_id} not found")
            if answer.question_id in seen:
                raise InvalidAnswersError(f"Question {answer.question_id} answered more than once")
            seen.add(answer.question_id)

            option = question.find_option(answer.option_id)
            if option is None:
                raise InvalidAnswersError(
                    f"Option {answer.option_id} not found for question {answer.question_id}"
                )
            options.append(option)
        return options
