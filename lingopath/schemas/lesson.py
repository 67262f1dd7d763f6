"""
Lesson content schemas for LingoPath.

Defines Pydantic models for curriculum content including:
- CEFR level tags (A1 lowest to C2 highest)
- Vocabulary entries
- Grammar rules
- Lessons, including checkpoint (treasure / challenge) lessons
"""

from enum import Enum
import unicodedata

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class CEFRLevel(str, Enum):
    """Proficiency tier; declaration order is the pedagogical order."""
    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"

    @property
    def rank(self) -> int:
        """0-based position in the canonical ordering."""
        return LEVEL_ORDER.index(self)


LEVEL_ORDER: tuple[CEFRLevel, ...] = tuple(CEFRLevel)


class LessonKind(str, Enum):
    LESSON = "lesson"
    TREASURE = "treasure"      # review chest
    CHALLENGE = "challenge"    # end-of-section test


# Topic markers identifying checkpoint lessons
TREASURE_MARKER = "Rương"
CHALLENGE_MARKER = "THỬ THÁCH"


def normalize_text(value: str) -> str:
    """NFC-normalize content text (source files mix NFC and NFD)."""
    return unicodedata.normalize("NFC", value)


# -----------------------------------------------------------------------------
# Lesson parts
# -----------------------------------------------------------------------------

class VocabularyItem(BaseModel):
    """One lexical entry. `type` is a free-text label such as "N", "N/V" or "Acronym"."""
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1)
    type: str
    meaning: str

    @field_validator("word", "type", "meaning")
    @classmethod
    def nfc(cls, v):
        return normalize_text(v)


class GrammarRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    form: str              # symbolic pattern, e.g. "S + am / is / are"
    usage: str
    example: str = Field(..., min_length=1)

    @field_validator("name", "form", "usage", "example")
    @classmethod
    def nfc(cls, v):
        return normalize_text(v)


# -----------------------------------------------------------------------------
# Lesson
# -----------------------------------------------------------------------------

class Lesson(BaseModel):
    """
    A unit of curriculum content.

    Checkpoint lessons (treasure chests and challenges) legitimately carry
    empty vocabulary and grammar.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    level_tag: CEFRLevel
    topic: str
    vocabulary: tuple[VocabularyItem, ...] = ()
    grammar: tuple[GrammarRule, ...] = ()

    @field_validator("topic")
    @classmethod
    def topic_nfc(cls, v):
        return normalize_text(v)

    @computed_field
    @property
    def kind(self) -> LessonKind:
        if TREASURE_MARKER in self.topic:
            return LessonKind.TREASURE
        if CHALLENGE_MARKER in self.topic:
            return LessonKind.CHALLENGE
        return LessonKind.LESSON

    @property
    def is_checkpoint(self) -> bool:
        return self.kind != LessonKind.LESSON
