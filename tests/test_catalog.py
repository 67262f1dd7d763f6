"""
Catalog, level index and query layer tests.
"""

import pytest

from lingopath.classroom import (
    CurriculumQuery,
    DuplicateLessonIdError,
    InvalidLevelTagError,
    LessonCatalog,
    LessonNotFoundError,
    LevelIndex,
    parse_level_tag,
)
from lingopath.schemas import CEFRLevel, LEVEL_ORDER, Lesson, LessonKind

from conftest import make_lesson


class TestParseLevelTag:

    def test_valid(self):
        assert parse_level_tag("B1") is CEFRLevel.B1
        assert parse_level_tag(CEFRLevel.C2) is CEFRLevel.C2

    def test_tolerates_case_and_whitespace(self):
        assert parse_level_tag(" a2 ") is CEFRLevel.A2

    def test_invalid(self):
        with pytest.raises(InvalidLevelTagError) as exc_info:
            parse_level_tag("Z9", 7)
        assert exc_info.value.level_tag == "Z9"
        assert exc_info.value.lesson_id == 7
        assert "lesson 7" in str(exc_info.value)

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError):
            parse_level_tag("")


class TestLessonCatalog:

    def test_lookup_round_trip(self, sample_lessons):
        catalog = LessonCatalog(sample_lessons)
        for lesson in catalog.all_lessons():
            assert catalog.lesson_by_id(lesson.id) == lesson

    def test_preserves_order(self, sample_lessons):
        catalog = LessonCatalog(sample_lessons)
        assert [lesson.id for lesson in catalog] == [1, 2, 3, 4, 5, 6, 7, 8]
        assert len(catalog) == 8

    def test_missing_id(self, sample_lessons):
        catalog = LessonCatalog(sample_lessons)
        with pytest.raises(LessonNotFoundError) as exc_info:
            catalog.lesson_by_id(9999)
        assert exc_info.value.lesson_id == 9999
        assert str(exc_info.value) == "Lesson not found: 9999"

    def test_not_found_is_key_error(self, sample_lessons):
        catalog = LessonCatalog(sample_lessons)
        with pytest.raises(KeyError):
            catalog.lesson_by_id(0)
        with pytest.raises(LessonNotFoundError):
            catalog.lesson_by_id("1")

    def test_contains(self, sample_lessons):
        catalog = LessonCatalog(sample_lessons)
        assert 4 in catalog
        assert 99 not in catalog
        assert [] not in catalog

    def test_duplicate_id(self):
        with pytest.raises(DuplicateLessonIdError) as exc_info:
            LessonCatalog([make_lesson(1), make_lesson(2), make_lesson(1, "B1")])
        assert exc_info.value.lesson_id == 1

    def test_non_increasing_ids_warn(self, caplog):
        catalog = LessonCatalog([make_lesson(2), make_lesson(1)])
        assert [lesson.id for lesson in catalog] == [2, 1]
        assert "ids should increase" in caplog.text

    def test_invalid_level_tag(self):
        bad = Lesson.model_construct(id=2, level_tag="Z9", topic="Broken", vocabulary=(), grammar=())
        with pytest.raises(InvalidLevelTagError) as exc_info:
            LessonCatalog([make_lesson(1), bad])
        assert exc_info.value.lesson_id == 2

    def test_empty_catalog(self):
        catalog = LessonCatalog([])
        assert catalog.all_lessons() == ()
        assert all(count == 0 for count in catalog.index.counts().values())

    def test_all_lessons_is_immutable(self, sample_lessons):
        catalog = LessonCatalog(sample_lessons)
        sample_lessons.append(make_lesson(100))
        assert len(catalog.all_lessons()) == 8
        assert isinstance(catalog.all_lessons(), tuple)


class TestLevelIndex:

    def test_grouping(self, sample_lessons):
        index = LevelIndex(sample_lessons)
        assert [lesson.id for lesson in index.lessons_for_level("A1")] == [1, 2, 3]
        assert [lesson.id for lesson in index.lessons_for_level(CEFRLevel.B1)] == [6, 8]

    def test_empty_levels(self, sample_lessons):
        index = LevelIndex(sample_lessons)
        assert index.lessons_for_level("C1") == ()
        assert index.lessons_for_level("C2") == ()

    def test_partition(self, sample_lessons):
        index = LevelIndex(sample_lessons)
        grouped = [lesson for level in LEVEL_ORDER for lesson in index.lessons_for_level(level)]
        assert sorted(lesson.id for lesson in grouped) == sorted(lesson.id for lesson in sample_lessons)

    def test_idempotent(self, sample_lessons):
        index = LevelIndex(sample_lessons)
        assert index.lessons_for_level("A2") == index.lessons_for_level("A2")

    def test_invalid_query(self, sample_lessons):
        index = LevelIndex(sample_lessons)
        with pytest.raises(InvalidLevelTagError):
            index.lessons_for_level("D1")

    def test_counts(self, sample_lessons):
        counts = LevelIndex(sample_lessons).counts()
        assert list(counts) == list(LEVEL_ORDER)
        assert counts[CEFRLevel.A1] == 3
        assert counts[CEFRLevel.C2] == 0

    def test_levels_in_order(self):
        assert LevelIndex.levels_in_order() == LEVEL_ORDER


class TestCurriculumQuery:

    def test_get_lesson(self, sample_lessons):
        query = CurriculumQuery(LessonCatalog(sample_lessons))
        assert query.get_lesson(4).level_tag == CEFRLevel.A2
        assert query.has_lesson(4)
        assert not query.has_lesson(40)

    def test_repeated_calls_agree(self, sample_lessons):
        query = CurriculumQuery(LessonCatalog(sample_lessons))
        assert query.get_lesson(3) is query.get_lesson(3)
        assert query.get_levels() == query.get_levels() == LEVEL_ORDER
        assert query.get_lessons_by_level("A1") == query.get_lessons_by_level("A1")
        assert query.get_level_counts() == query.get_level_counts()

    def test_get_lessons_by_level_unknown_string(self, sample_lessons):
        query = CurriculumQuery(LessonCatalog(sample_lessons))
        assert query.get_lessons_by_level("Z9") == ()

    def test_get_lessons_by_level_accepts_strings(self, sample_lessons):
        query = CurriculumQuery(LessonCatalog(sample_lessons))
        assert query.get_lessons_by_level("b2") == query.get_lessons_by_level(CEFRLevel.B2)

    def test_defaults_without_path_or_quiz(self, sample_lessons):
        query = CurriculumQuery(LessonCatalog(sample_lessons))
        assert query.get_path() == ()
        assert len(query.get_quiz_bank()) == 0


class TestBundledCurriculum:
    """Checks against the content shipped with the package."""

    def test_first_lesson(self, bundled_query):
        lesson = bundled_query.get_lesson(1)
        assert lesson.level_tag == CEFRLevel.A1
        assert lesson.topic == "Chào hỏi & Giới thiệu"
        assert len(lesson.vocabulary) == 20
        assert len(lesson.grammar) == 5

    def test_unknown_lesson(self, bundled_query):
        with pytest.raises(LessonNotFoundError):
            bundled_query.get_lesson(9999)

    def test_b1_lessons(self, bundled_query):
        ids = [lesson.id for lesson in bundled_query.get_lessons_by_level("B1")]
        assert ids == [16, 17, 18, 19, 20, 21, 22]

    def test_a1_treasure(self, bundled_query):
        lesson = bundled_query.get_lessons_by_level("A1")[2]
        assert lesson.id == 3
        assert lesson.kind == LessonKind.TREASURE
        assert lesson.vocabulary == ()
        assert lesson.grammar == ()

    def test_levels(self, bundled_query):
        assert [level.value for level in bundled_query.get_levels()] == ["A1", "A2", "B1", "B2", "C1", "C2"]

    def test_totals(self, bundled_query):
        lessons = bundled_query.get_all_lessons()
        assert len(lessons) == 45
        assert sum(bundled_query.get_level_counts().values()) == 45

    def test_checkpoints(self, bundled_query):
        checkpoints = [lesson.id for lesson in bundled_query.get_all_lessons() if lesson.is_checkpoint]
        assert checkpoints == [3, 10, 15, 18, 25, 30, 33, 40, 45]
        for lesson in bundled_query.get_all_lessons():
            if not lesson.is_checkpoint:
                assert len(lesson.vocabulary) == 20
                assert len(lesson.grammar) == 5

    @pytest.mark.parametrize("lesson_id", [3, 10, 15, 18, 25, 30, 33, 40, 45])
    def test_checkpoint_has_no_content(self, bundled_query, lesson_id):
        lesson = bundled_query.get_lesson(lesson_id)
        assert lesson.is_checkpoint
        assert lesson.vocabulary == ()
        assert lesson.grammar == ()

    def test_challenge_a1_a2(self, bundled_query):
        lesson = bundled_query.get_lesson(15)
        assert lesson.topic == "THỬ THÁCH A1-A2"
        assert lesson.level_tag == CEFRLevel.A2
        assert lesson.kind == LessonKind.CHALLENGE
        assert lesson.vocabulary == ()
        assert lesson.grammar == ()

    def test_queries_are_idempotent(self, bundled_query):
        assert bundled_query.get_lesson(15) == bundled_query.get_lesson(15)
        assert bundled_query.get_levels() == bundled_query.get_levels()
        assert bundled_query.get_all_lessons() == bundled_query.get_all_lessons()
        for level in bundled_query.get_levels():
            assert bundled_query.get_lessons_by_level(level) == bundled_query.get_lessons_by_level(level)

    def test_level_order_is_non_decreasing(self, bundled_query):
        ranks = [lesson.level_tag.rank for lesson in bundled_query.get_all_lessons()]
        assert ranks == sorted(ranks)
