"""
Placement quiz - Onboarding test that suggests a starting CEFR level.

Provides:
- QuizBank: read-only question bank with lookup by id, type and difficulty
- build_placement_quiz: random 5 fill-in + 5 reorder selection
- grade_placement: score answers and recommend levels
"""

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from lingopath.schemas import (
    CEFRLevel,
    Difficulty,
    FillInTheBlankQuestion,
    SentenceReorderQuestion,
)

from .errors import ContentIntegrityError, QuizQuestionNotFoundError

logger = logging.getLogger(__name__)

Question = Union[FillInTheBlankQuestion, SentenceReorderQuestion]

FILL_IN_COUNT = 5
REORDER_COUNT = 5
QUIZ_SIZE = FILL_IN_COUNT + REORDER_COUNT

# (minimum percent, recommended levels, label), checked top-down
RECOMMENDATION_BANDS: tuple[tuple[int, tuple[CEFRLevel, ...], str], ...] = (
    (80, (CEFRLevel.B2, CEFRLevel.C1), "Advanced"),
    (50, (CEFRLevel.A2, CEFRLevel.B1), "Intermediate"),
    (0, (CEFRLevel.A1,), "Beginner"),
)


class QuizBank:
    """Immutable collection of placement questions."""

    def __init__(self, questions: Iterable[Question] = ()):
        self._questions: tuple[Question, ...] = tuple(questions)
        self._by_id: dict[int, Question] = {}
        for question in self._questions:
            if question.id in self._by_id:
                raise ContentIntegrityError(f"Duplicate quiz question id: {question.id}")
            self._by_id[question.id] = question

    def __len__(self) -> int:
        return len(self._questions)

    def all_questions(self) -> tuple[Question, ...]:
        return self._questions

    def question(self, question_id: int) -> Question:
        try:
            return self._by_id[question_id]
        except (KeyError, TypeError):
            raise QuizQuestionNotFoundError(question_id) from None

    def fill_in_questions(self) -> tuple[FillInTheBlankQuestion, ...]:
        return tuple(q for q in self._questions if isinstance(q, FillInTheBlankQuestion))

    def reorder_questions(self) -> tuple[SentenceReorderQuestion, ...]:
        return tuple(q for q in self._questions if isinstance(q, SentenceReorderQuestion))

    def by_difficulty(self, difficulty: Union[str, Difficulty]) -> tuple[Question, ...]:
        difficulty = Difficulty(difficulty)
        return tuple(q for q in self._questions if q.difficulty == difficulty)


@dataclass(frozen=True)
class PlacementResult:
    """Graded placement quiz."""
    correct: int
    total: int
    percent: float
    recommended_levels: tuple[CEFRLevel, ...]
    label: str


def build_placement_quiz(
    bank: QuizBank,
    rng: Optional[random.Random] = None,
    fill_in_count: int = FILL_IN_COUNT,
    reorder_count: int = REORDER_COUNT,
) -> list[Question]:
    """
    Draw a placement quiz: fill-in questions first, then reorder questions.

    Args:
        bank: Question bank to sample from
        rng: Random source (seed one for reproducible quizzes)
        fill_in_count: Number of fill-in-the-blank questions
        reorder_count: Number of sentence-reorder questions

    Returns:
        Selected questions. Shorter than requested if the bank runs out.
    """
    rng = rng or random.Random()
    fill_in = list(bank.fill_in_questions())
    reorder = list(bank.reorder_questions())

    if len(fill_in) < fill_in_count or len(reorder) < reorder_count:
        logger.warning(
            f"Question bank too small: wanted {fill_in_count}+{reorder_count}, "
            f"have {len(fill_in)}+{len(reorder)}"
        )

    selected: list[Question] = []
    selected.extend(rng.sample(fill_in, min(fill_in_count, len(fill_in))))
    selected.extend(rng.sample(reorder, min(reorder_count, len(reorder))))
    return selected


def shuffled_parts(question: SentenceReorderQuestion, rng: Optional[random.Random] = None) -> list[str]:
    """Sentence chunks in random order for the word bank."""
    rng = rng or random.Random()
    parts = list(question.sentence_parts)
    rng.shuffle(parts)
    return parts


def check_answer(question: Question, answer: Optional[str]) -> bool:
    if answer is None:
        return False
    return question.check_answer(answer)


def recommend_levels(percent: float) -> tuple[tuple[CEFRLevel, ...], str]:
    for threshold, levels, label in RECOMMENDATION_BANDS:
        if percent >= threshold:
            return levels, label
    return RECOMMENDATION_BANDS[-1][1], RECOMMENDATION_BANDS[-1][2]


def grade_placement(questions: list[Question], answers: dict[int, str]) -> PlacementResult:
    """
    Grade a placement quiz.

    Args:
        questions: The questions that were asked
        answers: Question id -> submitted answer (unanswered ids may be absent)

    Returns:
        PlacementResult; an empty quiz scores 0%
    """
    total = len(questions)
    correct = sum(1 for q in questions if check_answer(q, answers.get(q.id)))
    percent = round(correct / total * 100, 1) if total else 0.0
    levels, label = recommend_levels(percent)
    return PlacementResult(
        correct=correct,
        total=total,
        percent=percent,
        recommended_levels=levels,
        label=label,
    )
