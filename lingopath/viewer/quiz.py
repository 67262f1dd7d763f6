"""
Quiz renderer - Placement quiz display.

Provides:
- Fill-in-the-blank and sentence-reorder question rendering
- Placement result display
"""

import html
from typing import Optional

from lingopath.classroom import PlacementResult
from lingopath.schemas import FillInTheBlankQuestion, SentenceReorderQuestion

DIFFICULTY_LABELS = {
    "easy": "Dễ",
    "medium": "Trung bình",
    "hard": "Khó",
}


def get_quiz_css() -> str:
    """Get CSS styles for quiz display."""
    return """
    <style>
    .quiz-container {
        background: #e3f2fd;
        border-radius: 12px;
        padding: 1.5em;
        margin: 1.5em 0;
        border-left: 4px solid #1976D2;
    }
    .quiz-title {
        font-weight: 600;
        color: #1565C0;
        font-size: 1.1em;
        margin-bottom: 0.6em;
    }
    .quiz-difficulty {
        float: right;
        font-size: 0.8em;
        color: #666;
    }
    .quiz-question {
        font-size: 1.05em;
        color: #333;
        margin-bottom: 1em;
        line-height: 1.6;
    }
    .quiz-chip {
        display: inline-block;
        background: white;
        border: 1px solid #90CAF9;
        border-radius: 16px;
        padding: 0.2em 0.8em;
        margin: 0.2em;
    }
    .quiz-hint {
        background: #fff3e0;
        padding: 0.8em 1em;
        border-radius: 8px;
        font-size: 0.95em;
        color: #e65100;
    }
    .quiz-score-box {
        background: #e8f5e9;
        border-radius: 8px;
        padding: 1em;
        margin-top: 1.5em;
        text-align: center;
    }
    .quiz-score-value {
        font-size: 2em;
        font-weight: 700;
        color: #388E3C;
    }
    .quiz-score-label {
        color: #666;
        font-size: 0.9em;
    }
    </style>
    """


def render_fill_in_question(question: FillInTheBlankQuestion, number: int) -> str:
    """Render a fill-in-the-blank question (options are chosen with widgets)."""
    difficulty = DIFFICULTY_LABELS[question.difficulty.value]
    return (
        f'<div class="quiz-container">'
        f'<div class="quiz-title">Câu {number}: Điền vào chỗ trống'
        f'<span class="quiz-difficulty">{difficulty}</span></div>'
        f'<div class="quiz-question">{html.escape(question.question_text)}</div>'
        f'</div>'
    )


def render_reorder_question(
    question: SentenceReorderQuestion,
    number: int,
    parts: Optional[list[str]] = None,
    show_hint: bool = False,
) -> str:
    """
    Render a sentence-reorder question.

    Args:
        question: The question
        number: 1-based position in the quiz
        parts: Chunks in display order (defaults to the stored order)
        show_hint: Whether to show the grammar hint
    """
    difficulty = DIFFICULTY_LABELS[question.difficulty.value]
    chips = ''.join(
        f'<span class="quiz-chip">{html.escape(part)}</span>'
        for part in (parts if parts is not None else question.sentence_parts)
    )
    result = [
        '<div class="quiz-container">',
        f'<div class="quiz-title">Câu {number}: Sắp xếp câu'
        f'<span class="quiz-difficulty">{difficulty}</span></div>',
        f'<div class="quiz-question">{chips}</div>',
    ]
    if show_hint and question.hint:
        result.append(f'<div class="quiz-hint">{html.escape(question.hint)}</div>')
    result.append('</div>')
    return ''.join(result)


def render_placement_result(result: PlacementResult) -> str:
    """Render placement score and level recommendation."""
    levels = ", ".join(level.value for level in result.recommended_levels)
    return f"""
    <div class="quiz-score-box">
        <div class="quiz-score-value">{result.correct} / {result.total}</div>
        <div class="quiz-score-label">{result.percent:g}% correct</div>
        <div><strong>{html.escape(result.label)}</strong> ({levels})</div>
    </div>
    """
