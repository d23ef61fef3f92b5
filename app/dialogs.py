import streamlit as st

from utils.code_detection import editor_kind
from utils.model_schemas import Note
from utils.notes_db import DuplicateCollectionError, create_collection, get_note_by_id

# Highlighting language for code-like notes
CODE_LANGUAGE = "javascript"


@st.dialog("New Collection", width="small")
def create_collection_dialog():
    """
    A Streamlit modal dialog for creating a new collection.
    Called by clicking "New collection" in the sidebar.
    """
    st.write("Enter the name for your new collection:")
    new_collection_name = st.text_input("Collection Name")

    c1, c2 = st.columns(2)
    with c1:
        if st.button("Create", key="create_collection_btn"):
            try:
                create_collection(new_collection_name)
            except ValueError:
                st.error("Name cannot be empty.")
            except DuplicateCollectionError:
                st.error("A collection with that name already exists!")
            else:
                st.rerun()  # closes the dialog and refreshes
    with c2:
        if st.button("Cancel", key="cancel_create_collection_btn"):
            st.rerun()


@st.dialog("Note", width="large")
def expand_note_dialog(note_id: int):
    """
    Full-width read view of a single note, opened from the expand
    button on its card. Reads the stored note so autosaved edits show.
    """
    note = get_note_by_id(note_id)
    if note is None:
        st.info("This note no longer exists.")
        return
    render_expanded_note(note)


def render_expanded_note(note: Note) -> None:
    if editor_kind(note.content) == "code":
        st.code(note.content, language=CODE_LANGUAGE)
    else:
        st.text(note.content)

    if note.hidden_content:
        st.divider()
        st.caption("Hidden")
        st.text(note.hidden_content)
