# main.py

"""
Entry point for the Notecards Streamlit application.
Initializes the database and session state, renders the sidebar,
and routes to the notes board or the flashcards view based on state.
"""

import streamlit as st

from flashcards import render_flashcards_page
from notes_board import render_notes_board
from sidebar import PAGE_FLASHCARDS, PAGE_NOTES, render_sidebar
from utils.notes_db import init_db


def init_session_state() -> None:
    """
    Ensure all expected Streamlit session_state keys exist with default values.
    """
    state = st.session_state
    state.setdefault("page", PAGE_NOTES)

    # Notes board: selection
    state.setdefault("selected_note_ids", set())

    # Flashcards: chosen collection and its quiz view-model
    state.setdefault("flashcard_collection_id", None)
    state.setdefault("flashcard_sequencer", None)
    state.setdefault("flashcard_scheduler", None)


def main() -> None:
    """
    Application entry point: initialize resources, render sidebar, and route to views.
    """
    st.set_page_config(page_title="Notecards", layout="wide")

    init_db()
    init_session_state()

    render_sidebar()

    if st.session_state.page == PAGE_FLASHCARDS:
        render_flashcards_page()
    else:
        render_notes_board()


if __name__ == "__main__":
    main()
