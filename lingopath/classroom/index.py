"""
LevelIndex - Lessons grouped by CEFR level.

Built once from the catalog's canonical order with a single stable pass,
then served from the cached buckets.
"""

from typing import Iterable, Optional, Union

from lingopath.schemas import CEFRLevel, LEVEL_ORDER, Lesson

from .errors import InvalidLevelTagError


def parse_level_tag(value: Union[str, CEFRLevel], lesson_id: Optional[int] = None) -> CEFRLevel:
    """
    Resolve a level code ("A1".."C2") to its CEFRLevel.

    Raises:
        InvalidLevelTagError: If the value is not one of the six levels
    """
    if isinstance(value, CEFRLevel):
        return value
    try:
        return CEFRLevel(str(value).strip().upper())
    except ValueError:
        raise InvalidLevelTagError(value, lesson_id) from None


class LevelIndex:
    """Mapping from level tag to that level's lessons, in catalog order."""

    def __init__(self, lessons: Iterable[Lesson]):
        buckets: dict[CEFRLevel, list[Lesson]] = {level: [] for level in LEVEL_ORDER}
        for lesson in lessons:
            level = parse_level_tag(lesson.level_tag, lesson.id)
            buckets[level].append(lesson)
        self._buckets: dict[CEFRLevel, tuple[Lesson, ...]] = {
            level: tuple(items) for level, items in buckets.items()
        }

    def lessons_for_level(self, level_tag: Union[str, CEFRLevel]) -> tuple[Lesson, ...]:
        """Lessons tagged with `level_tag`; empty tuple if the level has none."""
        return self._buckets[parse_level_tag(level_tag)]

    @staticmethod
    def levels_in_order() -> tuple[CEFRLevel, ...]:
        return LEVEL_ORDER

    def counts(self) -> dict[CEFRLevel, int]:
        """Lesson count per level, in canonical level order."""
        return {level: len(self._buckets[level]) for level in LEVEL_ORDER}
