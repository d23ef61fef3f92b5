import streamlit as st

from dialogs import create_collection_dialog
from flashcards import end_flashcard_quiz

PAGE_NOTES = "notes"
PAGE_FLASHCARDS = "flashcards"

PAGE_LABELS = {
    PAGE_NOTES: "Notes",
    PAGE_FLASHCARDS: "Flashcards",
}


def _on_page_change() -> None:
    """Leaving the flashcards view tears down the running quiz."""
    st.session_state.page = st.session_state.nav_page
    if st.session_state.page != PAGE_FLASHCARDS:
        end_flashcard_quiz()


def render_sidebar():
    """Navigation and collection tools live permanently in the sidebar."""
    with st.sidebar:
        st.markdown("## Notecards")

        pages = list(PAGE_LABELS)
        st.radio(
            "Go to",
            options=pages,
            index=pages.index(st.session_state.page),
            format_func=PAGE_LABELS.get,
            key="nav_page",
            on_change=_on_page_change,
        )

        st.divider()

        if st.button("New collection", icon=":material/create_new_folder:",
                     use_container_width=True, key="new_collection_btn"):
            create_collection_dialog()
