"""Errors raised by the curriculum catalog and query layer."""


class CatalogError(Exception):
    """Base class for catalog errors."""


class LessonNotFoundError(CatalogError, KeyError):
    """No lesson carries the requested id."""

    def __init__(self, lesson_id: int):
        super().__init__(lesson_id)
        self.lesson_id = lesson_id

    def __str__(self) -> str:
        return f"Lesson not found: {self.lesson_id}"


class PathNodeNotFoundError(CatalogError, KeyError):
    def __init__(self, node_id: int):
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Learning path node not found: {self.node_id}"


class QuizQuestionNotFoundError(CatalogError, KeyError):
    def __init__(self, question_id: int):
        super().__init__(question_id)
        self.question_id = question_id

    def __str__(self) -> str:
        return f"Quiz question not found: {self.question_id}"


class InvalidLevelTagError(CatalogError, ValueError):
    """A lesson carries a level tag outside A1-C2. Fatal at load time."""

    def __init__(self, level_tag, lesson_id=None):
        self.level_tag = level_tag
        self.lesson_id = lesson_id
        where = f" on lesson {lesson_id}" if lesson_id is not None else ""
        super().__init__(f"Invalid level tag {level_tag!r}{where}")


class DuplicateLessonIdError(CatalogError, ValueError):
    def __init__(self, lesson_id: int):
        self.lesson_id = lesson_id
        super().__init__(f"Duplicate lesson id: {lesson_id}")


class ContentIntegrityError(CatalogError, ValueError):
    """Cross-file content mismatch (learning path or quiz bank vs catalog)."""
