"""
LingoPath Classroom - Runtime components for loading and querying the curriculum.

This module provides:
- LessonCatalog / LevelIndex: immutable lesson storage and level grouping
- CurriculumQuery: the read-only interface screens call
- Content loading from bundled YAML
- LearningPath, Navigator and the placement quiz
"""

from .errors import (
    CatalogError,
    LessonNotFoundError,
    PathNodeNotFoundError,
    QuizQuestionNotFoundError,
    InvalidLevelTagError,
    DuplicateLessonIdError,
    ContentIntegrityError,
)

from .index import (
    LevelIndex,
    parse_level_tag,
)

from .catalog import LessonCatalog

from .path import LearningPath

from .placement import (
    QuizBank,
    PlacementResult,
    build_placement_quiz,
    shuffled_parts,
    check_answer,
    recommend_levels,
    grade_placement,
    QUIZ_SIZE,
)

from .query import CurriculumQuery

from .loader import (
    lesson_from_dict,
    load_lessons,
    load_learning_path,
    load_quiz_bank,
    build_query,
    get_default_query,
)

from .navigator import (
    Navigator,
    NavigationLevel,
)

__all__ = [
    # Errors
    "CatalogError",
    "LessonNotFoundError",
    "PathNodeNotFoundError",
    "QuizQuestionNotFoundError",
    "InvalidLevelTagError",
    "DuplicateLessonIdError",
    "ContentIntegrityError",
    # Catalog
    "LevelIndex",
    "parse_level_tag",
    "LessonCatalog",
    "LearningPath",
    # Placement
    "QuizBank",
    "PlacementResult",
    "build_placement_quiz",
    "shuffled_parts",
    "check_answer",
    "recommend_levels",
    "grade_placement",
    "QUIZ_SIZE",
    # Query
    "CurriculumQuery",
    # Loader
    "lesson_from_dict",
    "load_lessons",
    "load_learning_path",
    "load_quiz_bank",
    "build_query",
    "get_default_query",
    # Navigator
    "Navigator",
    "NavigationLevel",
]
