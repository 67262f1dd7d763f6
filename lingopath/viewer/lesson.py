"""
Lesson renderer - Generate HTML for lesson display.

Features:
- Vocabulary table with color-coded part-of-speech labels
- Grammar rule cards (form, usage, example)
- Checkpoint banner for treasure / challenge lessons
"""

import html
from typing import Optional

from lingopath.schemas import (
    GrammarRule,
    Lesson,
    LessonKind,
    PathNode,
    VocabularyItem,
)


# Word type to CSS class mapping for color coding
WORD_TYPE_COLORS = {
    "noun": "vocab-noun",              # Default
    "verb": "vocab-verb",              # Green
    "adjective": "vocab-adjective",    # Orange
    "adverb": "vocab-adverb",          # Purple
    "function": "vocab-function",      # Blue
    "other": "vocab-other",
}

# First label of a (possibly compound) type such as "N/V" -> word class
_TYPE_PREFIXES = {
    "n": "noun",
    "v": "verb",
    "modal": "verb",
    "aux": "verb",
    "adj": "adjective",
    "adv": "adverb",
    "prep": "function",
    "pron": "function",
    "conj": "function",
    "quantifier": "function",
}

CHECKPOINT_LABELS = {
    LessonKind.TREASURE: "Rương ôn tập",
    LessonKind.CHALLENGE: "Thử thách cấp độ",
}


def get_lesson_css() -> str:
    """Get CSS styles for lesson display."""
    return """
    <style>
    .lesson-header {
        display: flex;
        align-items: center;
        gap: 0.6em;
        margin-bottom: 0.5em;
    }
    .level-badge {
        background: #1976D2;
        color: white;
        border-radius: 12px;
        padding: 0.1em 0.7em;
        font-size: 0.85em;
        font-weight: 600;
    }
    .lesson-subtitle {
        color: #666;
        font-style: italic;
        margin-bottom: 1em;
    }
    .vocab-table {
        width: 100%;
        border-collapse: collapse;
        margin: 1em 0;
    }
    .vocab-table td {
        padding: 0.35em 0.6em;
        border-bottom: 1px solid #eee;
    }
    .vocab-word {
        font-weight: 500;
    }
    .vocab-type {
        font-size: 0.8em;
        border-radius: 3px;
        padding: 0 4px;
    }
    .vocab-noun {
        color: #455A64;
    }
    .vocab-verb {
        color: #388E3C;
    }
    .vocab-adjective {
        color: #F57C00;
    }
    .vocab-adverb {
        color: #7B1FA2;
    }
    .vocab-function {
        color: #1976D2;
    }
    .vocab-other {
        color: #757575;
    }
    .grammar-box {
        background: linear-gradient(135deg, #e3f2fd 0%, #f3e5f5 100%);
        border-radius: 8px;
        padding: 1.2em;
        margin: 1em 0;
    }
    .grammar-title {
        font-weight: 600;
        color: #1565C0;
        margin-bottom: 0.5em;
    }
    .grammar-example {
        background: #fafafa;
        border-left: 4px solid #1976D2;
        padding: 0.5em 1em;
        border-radius: 0 8px 8px 0;
        font-style: italic;
    }
    .checkpoint-banner {
        background: #fff8e1;
        border: 1px dashed #FFB300;
        border-radius: 8px;
        padding: 1.2em;
        text-align: center;
        margin: 1em 0;
    }
    </style>
    """


def detect_word_type(vocab: VocabularyItem) -> str:
    """
    Classify a vocabulary item for color coding.

    `type` is free text; compound labels ("N/V", "Adj/V") use their first
    part and anything unrecognized ("Acronym", "Phrase") maps to "other".
    """
    first = vocab.type.split("/")[0].strip().lower()
    return _TYPE_PREFIXES.get(first, "other")


def render_vocab_list(vocabulary: tuple[VocabularyItem, ...]) -> str:
    """Render vocabulary as a three-column table."""
    if not vocabulary:
        return ""

    rows = []
    for vocab in vocabulary:
        css_class = WORD_TYPE_COLORS[detect_word_type(vocab)]
        rows.append(
            f'<tr>'
            f'<td class="vocab-word">{html.escape(vocab.word)}</td>'
            f'<td><span class="vocab-type {css_class}">{html.escape(vocab.type)}</span></td>'
            f'<td class="vocab-meaning">{html.escape(vocab.meaning)}</td>'
            f'</tr>'
        )

    return f'<h3>Từ vựng ({len(vocabulary)})</h3><table class="vocab-table">{"".join(rows)}</table>'


def render_grammar_rule(rule: GrammarRule) -> str:
    """Render one grammar rule card."""
    parts = ['<div class="grammar-box">']
    parts.append(f'<div class="grammar-title">{html.escape(rule.name)}</div>')
    parts.append(f'<p><strong>Cấu trúc:</strong> <code>{html.escape(rule.form)}</code></p>')
    parts.append(f'<p><strong>Cách dùng:</strong> {html.escape(rule.usage)}</p>')
    parts.append(f'<div class="grammar-example">{html.escape(rule.example)}</div>')
    parts.append('</div>')
    return ''.join(parts)


def render_grammar_list(grammar: tuple[GrammarRule, ...]) -> str:
    if not grammar:
        return ""
    return '<h3>Ngữ pháp</h3>' + ''.join(render_grammar_rule(rule) for rule in grammar)


def render_checkpoint(lesson: Lesson) -> str:
    """Render the banner shown in place of content for checkpoint lessons."""
    label = CHECKPOINT_LABELS.get(lesson.kind, "")
    return (
        f'<div class="checkpoint-banner">'
        f'<strong>{html.escape(label)}</strong><br>'
        f'Ôn lại kiến thức cấp độ {lesson.level_tag.value}.'
        f'</div>'
    )


def render_lesson(lesson: Lesson, node: Optional[PathNode] = None) -> str:
    """
    Render complete lesson content as HTML.

    Args:
        lesson: Lesson to render
        node: Optional learning path node, used for the subtitle

    Returns:
        Complete HTML string for the lesson
    """
    parts = [get_lesson_css()]

    parts.append('<div class="lesson-header">')
    parts.append(f'<span class="level-badge">{lesson.level_tag.value}</span>')
    parts.append(f'<h1>{html.escape(lesson.topic)}</h1>')
    parts.append('</div>')

    if node and node.subtitle:
        parts.append(f'<div class="lesson-subtitle">{html.escape(node.subtitle)}</div>')

    if lesson.is_checkpoint:
        parts.append(render_checkpoint(lesson))
        return ''.join(parts)

    parts.append(render_vocab_list(lesson.vocabulary))
    parts.append(render_grammar_list(lesson.grammar))

    return ''.join(parts)
