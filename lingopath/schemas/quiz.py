"""
Placement quiz schemas for LingoPath.

Two question types share the bank:
- fill_in_the_blank: pick the one correct option
- sentence_reorder: arrange phrase chunks into the target sentence
"""

from enum import Enum
from typing import Annotated, Literal, Union
import re

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


_PUNCTUATION = re.compile(r"[^\w\s']")


def normalize_sentence(text: str) -> str:
    """Casefold, drop punctuation (apostrophes kept) and collapse whitespace."""
    text = text.replace("’", "'").casefold()
    return " ".join(_PUNCTUATION.sub(" ", text).split())


class AnswerOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    is_correct: bool = False


class QuizQuestionBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    type: str
    difficulty: Difficulty


class FillInTheBlankQuestion(QuizQuestionBase):
    type: Literal["fill_in_the_blank"] = "fill_in_the_blank"
    question_text: str     # contains a "_______" gap
    options: tuple[AnswerOption, ...] = Field(..., min_length=2)

    @model_validator(mode="after")
    def exactly_one_correct(self):
        correct = [o for o in self.options if o.is_correct]
        if len(correct) != 1:
            raise ValueError(
                f"Question {self.id} must have exactly one correct option, found {len(correct)}"
            )
        return self

    @property
    def correct_answer(self) -> str:
        return next(o.text for o in self.options if o.is_correct)

    def check_answer(self, answer: str) -> bool:
        return answer.strip() == self.correct_answer.strip()


class SentenceReorderQuestion(QuizQuestionBase):
    type: Literal["sentence_reorder"] = "sentence_reorder"
    sentence_parts: tuple[str, ...] = Field(..., min_length=2)
    correct_order: str
    hint: str = ""

    @model_validator(mode="after")
    def parts_cover_sentence(self):
        parts_words = sorted(normalize_sentence(" ".join(self.sentence_parts)).split())
        target_words = sorted(normalize_sentence(self.correct_order).split())
        if parts_words != target_words:
            raise ValueError(
                f"Question {self.id}: sentence parts do not match the words of the correct order"
            )
        return self

    @property
    def correct_answer(self) -> str:
        return self.correct_order

    def check_answer(self, answer: str) -> bool:
        """Compare ignoring case and punctuation; the reorder UI joins chunks with spaces."""
        return normalize_sentence(answer) == normalize_sentence(self.correct_order)


QuizQuestion = Annotated[
    Union[FillInTheBlankQuestion, SentenceReorderQuestion],
    Field(discriminator="type"),
]
