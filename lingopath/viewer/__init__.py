"""
LingoPath Viewer - Rendering components for the Streamlit app.

This module provides:
- Lesson rendering with color-coded vocabulary and grammar cards
- Placement quiz question and result display
"""

from .lesson import (
    get_lesson_css,
    detect_word_type,
    render_vocab_list,
    render_grammar_rule,
    render_grammar_list,
    render_checkpoint,
    render_lesson,
    WORD_TYPE_COLORS,
)

from .quiz import (
    get_quiz_css,
    render_fill_in_question,
    render_reorder_question,
    render_placement_result,
)

__all__ = [
    # Lesson rendering
    "get_lesson_css",
    "detect_word_type",
    "render_vocab_list",
    "render_grammar_rule",
    "render_grammar_list",
    "render_checkpoint",
    "render_lesson",
    "WORD_TYPE_COLORS",
    # Quiz
    "get_quiz_css",
    "render_fill_in_question",
    "render_reorder_question",
    "render_placement_result",
]
