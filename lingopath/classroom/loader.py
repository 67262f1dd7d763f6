"""
Content loader - Parse bundled YAML content into the runtime catalog.

Provides:
- load_lessons / load_learning_path / load_quiz_bank: file -> models
- build_query: assemble a CurriculumQuery from a content directory
- get_default_query: process-wide query over the configured content
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import TypeAdapter

from lingopath.schemas import Lesson, PathNode, QuizQuestion
from lingopath.utils import load_content_file

from .catalog import LessonCatalog
from .index import parse_level_tag
from .path import LearningPath
from .placement import QuizBank
from .query import CurriculumQuery

logger = logging.getLogger(__name__)

LESSONS_FILE = "lessons"
LEARNING_PATH_FILE = "learning_path"
QUIZ_BANK_FILE = "quiz_bank"

_question_adapter = TypeAdapter(QuizQuestion)


def _entries(document: dict[str, Any], key: str, name: str) -> list[dict[str, Any]]:
    entries = document.get(key) or []
    if not isinstance(entries, list):
        raise ValueError(f"'{key}' in {name}.yaml must be a list")
    return entries


def lesson_from_dict(raw: dict[str, Any]) -> Lesson:
    """
    Build a lesson from raw content.

    The level tag is resolved before model validation so a bad tag is
    reported as InvalidLevelTagError rather than a generic schema error.
    """
    level = parse_level_tag(raw.get("level_tag", ""), raw.get("id"))
    return Lesson.model_validate({**raw, "level_tag": level})


def load_lessons(content_dir: Optional[Path] = None) -> list[Lesson]:
    document = load_content_file(LESSONS_FILE, content_dir)
    lessons = [lesson_from_dict(raw) for raw in _entries(document, "lessons", LESSONS_FILE)]
    logger.info(f"Loaded {len(lessons)} lessons")
    return lessons


def load_learning_path(content_dir: Optional[Path] = None) -> list[PathNode]:
    document = load_content_file(LEARNING_PATH_FILE, content_dir)
    nodes = []
    for raw in _entries(document, "nodes", LEARNING_PATH_FILE):
        level = parse_level_tag(raw.get("level_tag", ""), raw.get("id"))
        nodes.append(PathNode.model_validate({**raw, "level_tag": level}))
    logger.info(f"Loaded {len(nodes)} learning path nodes")
    return nodes


def load_quiz_bank(content_dir: Optional[Path] = None) -> QuizBank:
    document = load_content_file(QUIZ_BANK_FILE, content_dir)
    questions = [
        _question_adapter.validate_python(raw)
        for raw in _entries(document, "questions", QUIZ_BANK_FILE)
    ]
    logger.info(f"Loaded {len(questions)} quiz questions")
    return QuizBank(questions)


def build_query(content_dir: Optional[Path] = None) -> CurriculumQuery:
    """
    Load all content and assemble the query layer.

    Learning path and quiz bank files are optional; the lesson file is not.

    Raises:
        FileNotFoundError: If lessons.yaml is missing
        InvalidLevelTagError: If any lesson or path node has a bad level tag
        DuplicateLessonIdError: If two lessons share an id
        ContentIntegrityError: If the path or quiz bank disagrees with the catalog
        pydantic.ValidationError: If content violates the schemas
    """
    catalog = LessonCatalog(load_lessons(content_dir))

    path = None
    try:
        path = LearningPath(load_learning_path(content_dir), catalog)
    except FileNotFoundError:
        logger.info("No learning path content; path queries will be empty")

    quiz_bank = None
    try:
        quiz_bank = load_quiz_bank(content_dir)
    except FileNotFoundError:
        logger.info("No quiz bank content; placement quiz disabled")

    return CurriculumQuery(catalog, path=path, quiz_bank=quiz_bank)


@lru_cache(maxsize=1)
def get_default_query() -> CurriculumQuery:
    """Query over the configured content, built on first use and shared thereafter."""
    return build_query()
