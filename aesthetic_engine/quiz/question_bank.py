"""Static question bank for the style quiz."""

from __future__ import annotations

import uuid
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from aesthetic_engine.domain.slugs import AestheticSlug
from aesthetic_engine.quiz.style_quiz import QuizOption, QuizQuestion, StyleQuiz

_RAW_QUESTIONS: list[dict[str, Any]] = [
    {
        "id": "q1",
        "text": "What colors do you gravitate towards?",
        "options": [
            ("q1-opt1", "Black, white, and neutrals",
             {"minimalist": 10, "dark-academia": 5, "normcore": 8, "old-money": 6}),
            ("q1-opt2", "Bold and bright colors",
             {"streetwear": 10, "athleisure": 5, "y2k": 9, "soft-girl": 7}),
            ("q1-opt3", "Soft pastels and earth tones",
             {"cottagecore": 10, "soft-girl": 9, "balletcore": 8, "coastal-grandmother": 6}),
            ("q1-opt4", "Rich, deep tones",
             {"dark-academia": 10, "old-money": 8, "romantic-academia": 7, "bohemian": 6}),
            ("q1-opt5", "Dark colors with neon accents",
             {"cyberpunk": 10, "techwear": 8, "streetwear": 6, "y2k": 5}),
            ("q1-opt6", "Earthy and natural tones",
             {"bohemian": 10, "cottagecore": 7, "gorpcore": 8, "vintage-americana": 6}),
        ],
    },
    {
        "id": "q2",
        "text": "Which setting appeals to you most?",
        "options": [
            ("q2-opt1", "Urban streets and city life",
             {"streetwear": 10, "skater": 9, "grunge": 7, "techwear": 8}),
            ("q2-opt2", "Libraries and coffee shops",
             {"dark-academia": 10, "romantic-academia": 8, "minimalist": 5}),
            ("q2-opt3", "Gardens and nature",
             {"cottagecore": 10, "bohemian": 7, "gorpcore": 6}),
            ("q2-opt4", "Modern, minimalist spaces",
             {"minimalist": 10, "normcore": 7, "athleisure": 6}),
            ("q2-opt5", "Coastal towns and beaches",
             {"coastal-grandmother": 10, "bohemian": 6, "minimalist": 4}),
            ("q2-opt6", "Art galleries and theaters",
             {"avant-garde": 10, "dark-academia": 6, "old-money": 7}),
            ("q2-opt7", "Mountains and hiking trails",
             {"gorpcore": 10, "athleisure": 7, "techwear": 5}),
        ],
    },
    {
        "id": "q3",
        "text": "What best describes your style preference?",
        "options": [
            ("q3-opt1", "Clean lines and simplicity",
             {"minimalist": 10, "normcore": 8, "athleisure": 6}),
            ("q3-opt2", "Edgy and statement-making",
             {"streetwear": 10, "grunge": 9, "cyberpunk": 8}),
            ("q3-opt3", "Romantic and vintage",
             {"cottagecore": 10, "romantic-academia": 9, "dark-academia": 6}),
            ("q3-opt4", "Classic and scholarly",
             {"dark-academia": 10, "old-money": 8, "vintage-americana": 6}),
            ("q3-opt5", "Cute and playful",
             {"soft-girl": 10, "y2k": 8, "balletcore": 7}),
            ("q3-opt6", "Free-spirited and eclectic",
             {"bohemian": 10, "avant-garde": 7, "cottagecore": 5}),
            ("q3-opt7", "Technical and functional",
             {"techwear": 10, "gorpcore": 9, "athleisure": 7}),
            ("q3-opt8", "Timeless and refined",
             {"old-money": 10, "coastal-grandmother": 8, "minimalist": 6}),
        ],
    },
    {
        "id": "q4",
        "text": "What fabrics do you prefer?",
        "options": [
            ("q4-opt1", "Technical and performance fabrics",
             {"athleisure": 10, "techwear": 10, "gorpcore": 9, "streetwear": 5}),
            ("q4-opt2", "Natural fibers like cotton and linen",
             {"cottagecore": 10, "coastal-grandmother": 9, "bohemian": 8, "minimalist": 6}),
            ("q4-opt3", "Luxe materials like wool and leather",
             {"dark-academia": 10, "old-money": 9, "vintage-americana": 7, "grunge": 5}),
            ("q4-opt4", "Soft, delicate fabrics",
             {"soft-girl": 10, "balletcore": 10, "romantic-academia": 8, "cottagecore": 6}),
            ("q4-opt5", "Shiny, metallic, or synthetic",
             {"y2k": 10, "cyberpunk": 9, "avant-garde": 7}),
            ("q4-opt6", "Durable, rugged materials",
             {"vintage-americana": 10, "gorpcore": 9, "grunge": 7, "skater": 6}),
            ("q4-opt7", "Whatever looks and feels good",
             {"normcore": 10, "minimalist": 6, "athleisure": 5, "streetwear": 5}),
        ],
    },
    {
        "id": "q5",
        "text": "How would you describe your ideal outfit?",
        "options": [
            ("q5-opt1", "Comfortable and functional",
             {"athleisure": 10, "normcore": 9, "minimalist": 7, "gorpcore": 8}),
            ("q5-opt2", "Bold and attention-grabbing",
             {"streetwear": 10, "avant-garde": 9, "cyberpunk": 8, "y2k": 7}),
            ("q5-opt3", "Soft and whimsical",
             {"cottagecore": 10, "soft-girl": 9, "romantic-academia": 7}),
            ("q5-opt4", "Timeless and sophisticated",
             {"dark-academia": 10, "old-money": 10, "minimalist": 6}),
            ("q5-opt5", "Graceful and elegant",
             {"balletcore": 10, "romantic-academia": 8, "old-money": 7}),
            ("q5-opt6", "Layered and artistic",
             {"bohemian": 10, "grunge": 8, "avant-garde": 7}),
            ("q5-opt7", "Casual and laid-back",
             {"coastal-grandmother": 10, "skater": 9, "normcore": 8, "vintage-americana": 6}),
            ("q5-opt8", "Utilitarian and prepared",
             {"techwear": 10, "gorpcore": 9, "streetwear": 5}),
        ],
    },
    {
        "id": "q6",
        "text": "What patterns or prints appeal to you?",
        "options": [
            ("q6-opt1", "Solid colors only",
             {"minimalist": 10, "normcore": 9, "techwear": 8, "athleisure": 7}),
            ("q6-opt2", "Floral and delicate prints",
             {"cottagecore": 10, "romantic-academia": 9, "soft-girl": 8, "bohemian": 7}),
            ("q6-opt3", "Plaid and checks",
             {"dark-academia": 10, "grunge": 9, "vintage-americana": 7, "skater": 6}),
            ("q6-opt4", "Bold graphics and logos",
             {"streetwear": 10, "y2k": 8, "skater": 8, "athleisure": 5}),
            ("q6-opt5", "Geometric and abstract",
             {"avant-garde": 10, "cyberpunk": 8, "minimalist": 6}),
            ("q6-opt6", "Stripes and nautical",
             {"coastal-grandmother": 10, "old-money": 7, "minimalist": 5}),
            ("q6-opt7", "Paisley, tribal, or ethnic prints",
             {"bohemian": 10, "vintage-americana": 5}),
        ],
    },
    {
        "id": "q7",
        "text": "What era or time period resonates with you?",
        "options": [
            ("q7-opt1", "The present and future",
             {"minimalist": 8, "techwear": 10, "cyberpunk": 10, "avant-garde": 9}),
            ("q7-opt2", "Early 2000s",
             {"y2k": 10, "streetwear": 6}),
            ("q7-opt3", "1990s",
             {"grunge": 10, "skater": 9, "minimalist": 5}),
            ("q7-opt4", "1950s-1970s",
             {"vintage-americana": 10, "bohemian": 8, "romantic-academia": 6}),
            ("q7-opt5", "Victorian/Edwardian era",
             {"dark-academia": 10, "romantic-academia": 10, "cottagecore": 7}),
            ("q7-opt6", "Timeless - no specific era",
             {"old-money": 10, "coastal-grandmother": 8, "minimalist": 7, "normcore": 6}),
        ],
    },
    {
        "id": "q8",
        "text": "What best describes your lifestyle?",
        "options": [
            ("q8-opt1", "Active and fitness-focused",
             {"athleisure": 10, "gorpcore": 9, "techwear": 6}),
            ("q8-opt2", "Creative and artistic",
             {"avant-garde": 10, "bohemian": 9, "romantic-academia": 7, "dark-academia": 6}),
            ("q8-opt3", "Urban and fast-paced",
             {"streetwear": 10, "techwear": 9, "minimalist": 7, "skater": 6}),
            ("q8-opt4", "Relaxed and nature-oriented",
             {"coastal-grandmother": 10, "cottagecore": 9, "bohemian": 8, "gorpcore": 7}),
            ("q8-opt5", "Academic and intellectual",
             {"dark-academia": 10, "romantic-academia": 8, "minimalist": 5}),
            ("q8-opt6", "Social and trend-conscious",
             {"y2k": 9, "soft-girl": 8, "streetwear": 7, "avant-garde": 6}),
            ("q8-opt7", "Practical and no-nonsense",
             {"normcore": 10, "vintage-americana": 8, "minimalist": 7}),
            ("q8-opt8", "Refined and traditional",
             {"old-money": 10, "dark-academia": 7, "coastal-grandmother": 6}),
        ],
    },
]


def _load_weights(option_id: str, raw_weights: Mapping[str, Any]) -> Mapping[AestheticSlug, int]:
    weights: dict[AestheticSlug, int] = {}
    for raw_slug, weight in raw_weights.items():
        try:
            slug = AestheticSlug(raw_slug)
        except ValueError as exc:
            raise ValueError(f"Option {option_id} references unknown aesthetic {raw_slug!r}") from exc
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
            raise ValueError(
                f"Option {option_id} has invalid weight {weight!r} for {raw_slug!r}; "
                "weights must be non-negative integers"
            )
        weights[slug] = weight
    return MappingProxyType(weights)


def load_question_bank(raw_questions: Sequence[Mapping[str, Any]]) -> tuple[QuizQuestion, ...]:
    """Validate raw question data and freeze it into quiz questions."""

    questions: list[QuizQuestion] = []
    for raw_question in raw_questions:
        options = tuple(
            QuizOption(id=option_id, text=text, weights=_load_weights(option_id, raw_weights))
            for option_id, text, raw_weights in raw_question["options"]
        )
        if not options:
            raise ValueError(f"Question {raw_question['id']} has no options")
        questions.append(QuizQuestion(id=raw_question["id"], text=raw_question["text"], options=options))
    return tuple(questions)


QUESTION_BANK: tuple[QuizQuestion, ...] = load_question_bank(_RAW_QUESTIONS)


def build_default_quiz() -> StyleQuiz:
    """Return a quiz over the static question bank with a fresh identifier."""

    return StyleQuiz.create(str(uuid.uuid4()), QUESTION_BANK)
