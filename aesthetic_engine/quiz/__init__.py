"""Style quiz questions, scoring and I/O models."""

from .question_bank import QUESTION_BANK, build_default_quiz, load_question_bank
from .schemas import AestheticResultSummary, QuizAnswer, QuizSubmissionResult
from .style_quiz import QuizOption, QuizQuestion, QuizResult, StyleQuiz

__all__ = [
    "QUESTION_BANK",
    "AestheticResultSummary",
    "QuizAnswer",
    "QuizOption",
    "QuizQuestion",
    "QuizResult",
    "QuizSubmissionResult",
    "StyleQuiz",
    "build_default_quiz",
    "load_question_bank",
]
