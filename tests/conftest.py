"""Shared fixtures for LingoPath tests."""

import textwrap

import pytest

from lingopath.classroom import build_query
from lingopath.config import DEFAULT_CONTENT_DIR
from lingopath.schemas import CEFRLevel, GrammarRule, Lesson, VocabularyItem


def make_lesson(lesson_id, level="A1", topic=None, vocab=1, grammar=1):
    return Lesson(
        id=lesson_id,
        level_tag=CEFRLevel(level),
        topic=topic or f"Topic {lesson_id}",
        vocabulary=tuple(
            VocabularyItem(word=f"word{lesson_id}_{i}", type="N", meaning=f"nghĩa {i}")
            for i in range(vocab)
        ),
        grammar=tuple(
            GrammarRule(name=f"Rule {i}", form="S + V", usage="Dùng khi...", example="I go.")
            for i in range(grammar)
        ),
    )


@pytest.fixture
def sample_lessons():
    """Eight lessons spanning A1-B1 with a treasure and a challenge; C1/C2 left empty."""
    return [
        make_lesson(1, "A1"),
        make_lesson(2, "A1"),
        make_lesson(3, "A1", topic="Rương A1/1", vocab=0, grammar=0),
        make_lesson(4, "A2"),
        make_lesson(5, "A2", topic="THỬ THÁCH A1-A2", vocab=0, grammar=0),
        make_lesson(6, "B1"),
        make_lesson(7, "B2"),
        make_lesson(8, "B1"),
    ]


@pytest.fixture(scope="session")
def bundled_query():
    """Query over the content shipped with the package."""
    return build_query(DEFAULT_CONTENT_DIR)


@pytest.fixture
def write_content(tmp_path):
    """Write named YAML documents into a temporary content directory."""
    def _write(**files):
        for name, body in files.items():
            (tmp_path / f"{name}.yaml").write_text(textwrap.dedent(body), encoding="utf-8")
        return tmp_path
    return _write


LESSONS_YAML = """
lessons:
  - id: 1
    level_tag: A1
    topic: "Chào hỏi"
    vocabulary:
      - {word: "hello", type: "Interjection", meaning: "xin chào"}
    grammar:
      - {name: "To Be", form: "S + am/is/are", usage: "Giới thiệu", example: "I am Nam."}
  - id: 2
    level_tag: A1
    topic: "Rương A1/1"
    vocabulary: []
    grammar: []
  - id: 3
    level_tag: A2
    topic: "Quá khứ"
    vocabulary:
      - {word: "went", type: "V", meaning: "đã đi"}
    grammar: []
"""

PATH_YAML = """
nodes:
  - {id: 1, node_type: lesson, section: 1, title: "Chào hỏi", subtitle: "To Be", level_tag: A1, level: 1}
  - {id: 2, node_type: treasure, section: 1, title: "Rương A1/1", level_tag: A1}
  - {id: 3, node_type: lesson, section: 1, title: "Quá khứ", level_tag: A2, level: 1}
"""

QUIZ_YAML = """
questions:
  - id: 1
    type: fill_in_the_blank
    difficulty: easy
    question_text: "She _______ going out."
    options:
      - {text: "is", is_correct: true}
      - {text: "am", is_correct: false}
  - id: 2
    type: sentence_reorder
    difficulty: medium
    sentence_parts: ["to visit", "I would like", "France"]
    correct_order: "I would like to visit France"
"""
