"""
CurriculumQuery - The read-only interface screens are allowed to call.

Wraps the lesson catalog, level index, learning path and quiz bank. There
are no write operations; changing content means rebuilding from source.
"""

import logging
from typing import Optional, Union

from lingopath.schemas import CEFRLevel, Lesson, PathNode

from .catalog import LessonCatalog
from .errors import InvalidLevelTagError
from .path import LearningPath
from .placement import Question, QuizBank

logger = logging.getLogger(__name__)


class CurriculumQuery:
    """Query layer over immutable curriculum content."""

    def __init__(
        self,
        catalog: LessonCatalog,
        path: Optional[LearningPath] = None,
        quiz_bank: Optional[QuizBank] = None,
    ):
        self._catalog = catalog
        self._path = path if path is not None else LearningPath((), catalog)
        self._quiz_bank = quiz_bank if quiz_bank is not None else QuizBank()

    # -------------------------------------------------------------------------
    # Lessons
    # -------------------------------------------------------------------------

    def get_lesson(self, lesson_id: int) -> Lesson:
        """Raises LessonNotFoundError if no lesson has this id."""
        return self._catalog.lesson_by_id(lesson_id)

    def has_lesson(self, lesson_id: int) -> bool:
        return lesson_id in self._catalog

    def get_all_lessons(self) -> tuple[Lesson, ...]:
        return self._catalog.all_lessons()

    def get_lessons_by_level(self, level_tag: Union[str, CEFRLevel]) -> tuple[Lesson, ...]:
        """Lessons for a level in catalog order; never fails, unknown tags give ()."""
        try:
            return self._catalog.index.lessons_for_level(level_tag)
        except InvalidLevelTagError:
            logger.debug(f"Query for unknown level tag {level_tag!r}")
            return ()

    def get_levels(self) -> tuple[CEFRLevel, ...]:
        return self._catalog.index.levels_in_order()

    def get_level_counts(self) -> dict[CEFRLevel, int]:
        return self._catalog.index.counts()

    # -------------------------------------------------------------------------
    # Learning path
    # -------------------------------------------------------------------------

    def get_path(self) -> tuple[PathNode, ...]:
        return self._path.nodes()

    def get_path_node(self, node_id: int) -> PathNode:
        """Raises PathNodeNotFoundError if the node is absent."""
        return self._path.node(node_id)

    def get_path_section(self, section: int) -> tuple[PathNode, ...]:
        return self._path.section(section)

    # -------------------------------------------------------------------------
    # Placement quiz
    # -------------------------------------------------------------------------

    def get_quiz_bank(self) -> QuizBank:
        return self._quiz_bank

    def get_quiz_question(self, question_id: int) -> Question:
        """Raises QuizQuestionNotFoundError if the question is absent."""
        return self._quiz_bank.question(question_id)
