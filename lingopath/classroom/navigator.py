"""
Navigator - Lesson sequencing for the level picker and lesson screens.

Provides:
- Next/previous lesson navigation in catalog order
- Next lesson within the same level
- Lesson position (n of total)
- Per-level navigation tree
"""

from dataclasses import dataclass
from typing import Optional

from lingopath.schemas import CEFRLevel, Lesson, LessonKind

from .query import CurriculumQuery


@dataclass
class NavigationLevel:
    """One level with its lessons and counts."""
    level: CEFRLevel
    lessons: tuple[Lesson, ...]
    lesson_count: int
    checkpoint_count: int


class Navigator:
    """
    Navigate the curriculum in canonical order.

    Only reads through CurriculumQuery; nothing here touches storage.
    """

    def __init__(self, query: CurriculumQuery):
        self.query = query
        self._lesson_order: list[int] = [lesson.id for lesson in query.get_all_lessons()]
        self._lesson_index: dict[int, int] = {lid: idx for idx, lid in enumerate(self._lesson_order)}

    @property
    def total_lessons(self) -> int:
        return len(self._lesson_order)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def get_first_lesson_id(self) -> Optional[int]:
        return self._lesson_order[0] if self._lesson_order else None

    def get_next_lesson_id(self, current_id: int) -> Optional[int]:
        """Get the ID of the next lesson in order."""
        if current_id not in self._lesson_index:
            return None
        current_idx = self._lesson_index[current_id]
        if current_idx + 1 >= len(self._lesson_order):
            return None
        return self._lesson_order[current_idx + 1]

    def get_previous_lesson_id(self, current_id: int) -> Optional[int]:
        """Get the ID of the previous lesson in order."""
        if current_id not in self._lesson_index:
            return None
        current_idx = self._lesson_index[current_id]
        if current_idx <= 0:
            return None
        return self._lesson_order[current_idx - 1]

    def get_next_lesson_in_level(self, current_id: int) -> Optional[int]:
        """Next lesson sharing the current lesson's level, skipping other levels."""
        if current_id not in self._lesson_index:
            return None
        level = self.query.get_lesson(current_id).level_tag
        ids = [lesson.id for lesson in self.query.get_lessons_by_level(level)]
        pos = ids.index(current_id)
        return ids[pos + 1] if pos + 1 < len(ids) else None

    def get_lesson_position(self, lesson_id: int) -> tuple[int, int]:
        """
        Get lesson position as (current, total).

        Returns (0, total) if lesson not found.
        """
        if lesson_id not in self._lesson_index:
            return (0, len(self._lesson_order))
        return (self._lesson_index[lesson_id] + 1, len(self._lesson_order))

    # -------------------------------------------------------------------------
    # Curriculum Tree
    # -------------------------------------------------------------------------

    def get_navigation_tree(self) -> list[NavigationLevel]:
        """All six levels in canonical order, including empty ones."""
        tree = []
        for level in self.query.get_levels():
            lessons = self.query.get_lessons_by_level(level)
            tree.append(NavigationLevel(
                level=level,
                lessons=lessons,
                lesson_count=len(lessons),
                checkpoint_count=sum(1 for lesson in lessons if lesson.is_checkpoint),
            ))
        return tree

    def get_status_indicator(self, lesson: Lesson) -> str:
        """
        Get marker for sidebar display.

        Returns:
            ★ for treasure chests
            ⚑ for challenges
            ○ for regular lessons
        """
        if lesson.kind == LessonKind.TREASURE:
            return "★"
        elif lesson.kind == LessonKind.CHALLENGE:
            return "⚑"
        return "○"
