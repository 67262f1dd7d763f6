"""
Streamlit app tests, run headless through AppTest.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).parent.parent / "app.py")
TIMEOUT = 30


def button(at, label):
    return next(b for b in at.button if b.label == label)


@pytest.fixture
def app():
    at = AppTest.from_file(APP_PATH, default_timeout=TIMEOUT)
    at.run()
    assert not at.exception
    return at


class TestLessonView:

    def test_default_view_shows_first_lesson(self, app):
        assert app.session_state["view_mode"] == "lesson"
        assert app.session_state["current_lesson_id"] == 1
        assert any("Lesson 1 of 45" in m.value for m in app.markdown)

    def test_rerun_keeps_lesson_view(self, app):
        app.run()
        assert not app.exception
        assert app.session_state["view_mode"] == "lesson"
        assert any("Lesson 1 of 45" in m.value for m in app.markdown)

    def test_next_button(self, app):
        button(app, "Next →").click().run()
        assert not app.exception
        assert app.session_state["current_lesson_id"] == 2
        assert app.session_state["view_mode"] == "lesson"

    def test_switch_view(self, app):
        app.sidebar.radio[0].set_value("Path").run()
        assert not app.exception
        assert app.session_state["view_mode"] == "path"
        app.run()
        assert app.session_state["view_mode"] == "path"


class TestPlacementView:

    def _start(self, app):
        app.sidebar.radio[0].set_value("Placement").run()
        button(app, "Start quiz").click().run()
        assert not app.exception
        return app.session_state["placement"]

    def test_quiz_has_ten_questions(self, app):
        state = self._start(app)
        assert len(state["questions"]) == 10

    def test_cleared_reorder_answer_is_not_graded(self, app):
        state = self._start(app)
        question = state["questions"][-1]
        widget = app.multiselect(key=f"placement_{question.id}")
        ordered = sorted(question.sentence_parts, key=question.correct_order.find)

        widget.set_value(ordered).run()
        assert app.session_state["placement"]["answers"][question.id]

        app.multiselect(key=f"placement_{question.id}").set_value([]).run()
        assert question.id not in app.session_state["placement"]["answers"]

        button(app, "Submit").click().run()
        assert not app.exception
        result = app.session_state["placement"]["result"]
        assert result.correct == 0
        assert result.total == 10
