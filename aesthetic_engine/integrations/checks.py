"""Consistency checks between the static quiz tables and the aesthetic catalog."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable

from aesthetic_engine.catalog.base import AestheticCatalog
from aesthetic_engine.quiz.question_bank import build_default_quiz
from aesthetic_engine.quiz.style_quiz import StyleQuiz


@dataclass(slots=True)
class IntegrationCheckResult:
    """Structured result describing the check outcome."""

    name: str
    success: bool
    message: str


async def _run_check(
    name: str,
    factory: Callable[[], Awaitable[list[str]]],
    success_message: str,
) -> IntegrationCheckResult:
    try:
        problems = await factory()
    except Exception as exc:  # pragma: no cover - defensive branch
        return IntegrationCheckResult(name=name, success=False, message=str(exc))

    if not problems:
        return IntegrationCheckResult(name=name, success=True, message=success_message)
    return IntegrationCheckResult(name=name, success=False, message="; ".join(problems))


def quiz_slugs(quiz: StyleQuiz) -> list[str]:
    """Return every aesthetic slug the quiz can vote for, in first-seen order."""

    seen: dict[str, None] = {}
    for question in quiz.questions:
        for option in question.options:
            for slug in option.weights:
                seen.setdefault(slug.value, None)
    return list(seen)


async def check_quiz_catalog(
    catalog: AestheticCatalog,
    quiz: StyleQuiz | None = None,
) -> IntegrationCheckResult:
    """Verify that every slug the quiz can rank resolves to a catalog aesthetic."""

    quiz = quiz or build_default_quiz()

    async def _missing() -> list[str]:
        slugs = quiz_slugs(quiz)
        found = await asyncio.gather(*(catalog.find_by_name(slug) for slug in slugs))
        missing = [slug for slug, aesthetic in zip(slugs, found) if aesthetic is None]
        if not missing:
            return []
        return [f"Quiz aesthetics missing from catalog: {', '.join(missing)}"]

    return await _run_check(
        name="Quiz catalog",
        factory=_missing,
        success_message="Every quiz aesthetic is present in the catalog.",
    )


async def check_catalog_not_empty(catalog: AestheticCatalog) -> IntegrationCheckResult:
    """Verify the catalog returns at least one aesthetic."""

    async def _empty() -> list[str]:
        aesthetics = await catalog.find_all()
        return [] if aesthetics else ["Catalog contains no aesthetics."]

    return await _run_check(
        name="Catalog contents",
        factory=_empty,
        success_message="Catalog is populated.",
    )


async def run_all_checks(catalog: AestheticCatalog) -> list[IntegrationCheckResult]:
    """Execute all checks concurrently."""

    return list(await asyncio.gather(check_catalog_not_empty(catalog), check_quiz_catalog(catalog)))
