"""
LingoPath Schemas - Pydantic models for the curriculum.

This module exports all schema classes for:
- Lesson: CEFR levels, vocabulary, grammar rules, lessons
- Path: learning path nodes and sections
- Quiz: placement quiz question bank
"""

# Lesson schemas
from .lesson import (
    CEFRLevel,
    LEVEL_ORDER,
    LessonKind,
    TREASURE_MARKER,
    CHALLENGE_MARKER,
    VocabularyItem,
    GrammarRule,
    Lesson,
    normalize_text,
)

# Path schemas
from .path import (
    NodeType,
    PathNode,
    SECTION_LEVELS,
    SECTION_TITLES,
)

# Quiz schemas
from .quiz import (
    Difficulty,
    AnswerOption,
    FillInTheBlankQuestion,
    SentenceReorderQuestion,
    QuizQuestion,
    normalize_sentence,
)

__all__ = [
    # Lesson
    'CEFRLevel',
    'LEVEL_ORDER',
    'LessonKind',
    'TREASURE_MARKER',
    'CHALLENGE_MARKER',
    'VocabularyItem',
    'GrammarRule',
    'Lesson',
    'normalize_text',
    # Path
    'NodeType',
    'PathNode',
    'SECTION_LEVELS',
    'SECTION_TITLES',
    # Quiz
    'Difficulty',
    'AnswerOption',
    'FillInTheBlankQuestion',
    'SentenceReorderQuestion',
    'QuizQuestion',
    'normalize_sentence',
]
