"""
LessonCatalog - The ordered, immutable set of curriculum lessons.

Constructed once from loaded content. Lookups by id go through a dict
built at construction; the level index is built alongside it.
"""

import logging
from typing import Iterable, Iterator

from lingopath.schemas import Lesson

from .errors import DuplicateLessonIdError, LessonNotFoundError
from .index import LevelIndex

logger = logging.getLogger(__name__)


class LessonCatalog:
    """
    Read-only lesson catalog.

    Catalog order is the canonical presentation order. Lessons are frozen
    models and the sequence is a tuple, so nothing handed out can mutate
    the catalog.
    """

    def __init__(self, lessons: Iterable[Lesson]):
        """
        Build the catalog and its level index.

        Args:
            lessons: Lessons in authoring order

        Raises:
            DuplicateLessonIdError: If two lessons share an id
            InvalidLevelTagError: If a lesson's level tag is not A1-C2
        """
        self._lessons: tuple[Lesson, ...] = tuple(lessons)
        self._by_id: dict[int, Lesson] = {}

        previous_id = 0
        for lesson in self._lessons:
            if lesson.id in self._by_id:
                raise DuplicateLessonIdError(lesson.id)
            if lesson.id <= previous_id:
                logger.warning(
                    f"Lesson id {lesson.id} follows {previous_id}; ids should increase in authoring order"
                )
            self._by_id[lesson.id] = lesson
            previous_id = max(previous_id, lesson.id)

        self.index = LevelIndex(self._lessons)
        logger.debug(f"Catalog built: {len(self._lessons)} lessons")

    def all_lessons(self) -> tuple[Lesson, ...]:
        return self._lessons

    def lesson_by_id(self, lesson_id: int) -> Lesson:
        """Exact-match lookup; raises LessonNotFoundError if absent."""
        try:
            return self._by_id[lesson_id]
        except (KeyError, TypeError):
            raise LessonNotFoundError(lesson_id) from None

    def __len__(self) -> int:
        return len(self._lessons)

    def __iter__(self) -> Iterator[Lesson]:
        return iter(self._lessons)

    def __contains__(self, lesson_id: object) -> bool:
        try:
            return lesson_id in self._by_id
        except TypeError:
            return False
