"""
LingoPath - Leveled English Curriculum

Streamlit application for browsing the A1-C2 curriculum and taking the
placement quiz. Designed for Vietnamese speakers.

Usage:
    streamlit run app.py
"""

import logging
import random

import streamlit as st
from dotenv import load_dotenv

from lingopath.classroom import (
    CatalogError,
    LessonNotFoundError,
    Navigator,
    PathNodeNotFoundError,
    build_placement_quiz,
    get_default_query,
    grade_placement,
    shuffled_parts,
)
from lingopath.config import LOG_FORMAT, get_log_level
from lingopath.schemas import FillInTheBlankQuestion, SECTION_TITLES
from lingopath.viewer import (
    get_quiz_css,
    render_fill_in_question,
    render_lesson,
    render_placement_result,
    render_reorder_question,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

load_dotenv()

logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="LingoPath",
    page_icon="📘",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Radio label -> view mode
VIEW_MODES = {
    "Lessons": "lesson",
    "Path": "path",
    "Placement": "placement",
}


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "query" not in st.session_state:
        try:
            st.session_state.query = get_default_query()
        except (CatalogError, FileNotFoundError, ValueError) as e:
            logger.error(f"Failed to load curriculum: {e}")
            st.session_state.query = None
            st.session_state.load_error = str(e)

    if "navigator" not in st.session_state and st.session_state.query:
        st.session_state.navigator = Navigator(st.session_state.query)

    if "current_lesson_id" not in st.session_state:
        nav = st.session_state.get("navigator")
        st.session_state.current_lesson_id = nav.get_first_lesson_id() if nav else None

    if "view_mode" not in st.session_state:
        st.session_state.view_mode = "lesson"  # lesson, path, placement

    if "placement" not in st.session_state:
        st.session_state.placement = None


# -----------------------------------------------------------------------------
# Sidebar: Level Picker
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with the level picker."""
    st.sidebar.title("📘 LingoPath")

    if not st.session_state.query:
        st.sidebar.error("Curriculum content failed to load.")
        return

    query = st.session_state.query
    st.sidebar.markdown(f"**{len(query.get_all_lessons())} lessons** across {len(query.get_levels())} levels")

    st.sidebar.divider()

    st.sidebar.subheader("View Mode")
    view_mode = st.sidebar.radio(
        "Select view",
        list(VIEW_MODES),
        index=list(VIEW_MODES.values()).index(st.session_state.view_mode),
        horizontal=True,
        label_visibility="collapsed",
    )
    st.session_state.view_mode = VIEW_MODES[view_mode]

    if st.session_state.view_mode == "lesson":
        render_level_tree()


def render_level_tree():
    """Render levels with their lessons."""
    nav = st.session_state.navigator

    st.sidebar.divider()
    st.sidebar.subheader("Levels")

    current_level = None
    if st.session_state.current_lesson_id:
        current_level = st.session_state.query.get_lesson(st.session_state.current_lesson_id).level_tag

    for nav_level in nav.get_navigation_tree():
        header = f"**{nav_level.level.value}** ({nav_level.lesson_count})"
        with st.sidebar.expander(header, expanded=nav_level.level == current_level):
            if not nav_level.lessons:
                st.caption("No lessons yet.")
            for lesson in nav_level.lessons:
                label = f"{nav.get_status_indicator(lesson)} {lesson.topic}"
                if st.button(label, key=f"lesson_{lesson.id}", use_container_width=True):
                    select_lesson(lesson.id)


def select_lesson(lesson_id: int):
    """Select a lesson and update state."""
    st.session_state.current_lesson_id = lesson_id
    st.session_state.view_mode = "lesson"
    st.rerun()


# -----------------------------------------------------------------------------
# Main Content: Lesson View
# -----------------------------------------------------------------------------

def render_lesson_view():
    """Render the selected lesson."""
    if not st.session_state.query:
        st.error(f"Curriculum content failed to load: {st.session_state.get('load_error', '')}")
        st.code("python scripts/check_content.py --verbose")
        return

    lesson_id = st.session_state.current_lesson_id
    if not lesson_id:
        st.info("Select a lesson from the sidebar to begin.")
        return

    query = st.session_state.query
    try:
        lesson = query.get_lesson(lesson_id)
    except LessonNotFoundError:
        st.error(f"Lesson not found: {lesson_id}")
        return

    try:
        node = query.get_path_node(lesson_id)
    except PathNodeNotFoundError:
        node = None

    render_navigation_bar(lesson_id)
    st.markdown(render_lesson(lesson, node), unsafe_allow_html=True)


def render_navigation_bar(lesson_id: int):
    """Render navigation bar with prev/next buttons."""
    nav = st.session_state.navigator
    pos, total = nav.get_lesson_position(lesson_id)

    prev_id = nav.get_previous_lesson_id(lesson_id)
    next_id = nav.get_next_lesson_id(lesson_id)

    col1, col2, col3 = st.columns([1, 2, 1])

    with col1:
        if prev_id and st.button("← Previous", use_container_width=True):
            select_lesson(prev_id)

    with col2:
        st.markdown(f"<center>Lesson {pos} of {total}</center>", unsafe_allow_html=True)

    with col3:
        if next_id and st.button("Next →", use_container_width=True):
            select_lesson(next_id)

    st.divider()


# -----------------------------------------------------------------------------
# Learning Path View
# -----------------------------------------------------------------------------

def render_path_view():
    """Render the learning path by section."""
    if not st.session_state.query:
        st.error("Curriculum content failed to load.")
        return

    st.title("Learning Path")
    query = st.session_state.query

    if not query.get_path():
        st.info("No learning path content is installed.")
        return

    for section, title in SECTION_TITLES.items():
        nodes = query.get_path_section(section)
        if not nodes:
            continue
        st.subheader(title)
        for node in nodes:
            col1, col2 = st.columns([1, 9])
            with col1:
                st.markdown(f"`{node.level_tag.value}`")
            with col2:
                if st.button(f"{node.title} · {node.subtitle}", key=f"node_{node.id}", use_container_width=True):
                    select_lesson(node.id)


# -----------------------------------------------------------------------------
# Placement Quiz View
# -----------------------------------------------------------------------------

def start_placement():
    bank = st.session_state.query.get_quiz_bank()
    rng = random.Random()
    questions = build_placement_quiz(bank, rng=rng)
    st.session_state.placement = {
        "questions": questions,
        "parts": {
            q.id: shuffled_parts(q, rng)
            for q in questions if not isinstance(q, FillInTheBlankQuestion)
        },
        "answers": {},
        "result": None,
    }


def render_placement_view():
    """Render the placement quiz."""
    if not st.session_state.query:
        st.error("Curriculum content failed to load.")
        return

    st.title("Placement Quiz")

    if not len(st.session_state.query.get_quiz_bank()):
        st.info("No quiz bank content is installed.")
        return

    if st.session_state.placement is None:
        if st.button("Start quiz", type="primary"):
            start_placement()
            st.rerun()
        return

    state = st.session_state.placement
    st.markdown(get_quiz_css(), unsafe_allow_html=True)

    for number, question in enumerate(state["questions"], start=1):
        if isinstance(question, FillInTheBlankQuestion):
            st.markdown(render_fill_in_question(question, number), unsafe_allow_html=True)
            choice = st.radio(
                "Answer",
                [o.text for o in question.options],
                index=None,
                key=f"placement_{question.id}",
                label_visibility="collapsed",
            )
        else:
            parts = state["parts"][question.id]
            st.markdown(render_reorder_question(question, number, parts=parts), unsafe_allow_html=True)
            chosen = st.multiselect(
                "Build the sentence",
                parts,
                key=f"placement_{question.id}",
                label_visibility="collapsed",
            )
            choice = " ".join(chosen) if chosen else None
        if choice:
            state["answers"][question.id] = choice
        else:
            state["answers"].pop(question.id, None)

    if st.button("Submit", type="primary", use_container_width=True):
        state["result"] = grade_placement(state["questions"], state["answers"])

    if state["result"]:
        st.markdown(render_placement_result(state["result"]), unsafe_allow_html=True)
        if st.button("Retake"):
            st.session_state.placement = None
            st.rerun()


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()

    if st.session_state.view_mode == "lesson":
        render_lesson_view()
    elif st.session_state.view_mode == "path":
        render_path_view()
    elif st.session_state.view_mode == "placement":
        render_placement_view()


if __name__ == "__main__":
    main()
