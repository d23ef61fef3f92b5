# notes_board.py

"""
The notes board: create notes, edit them in place with autosave, reveal
each note's hidden content, file notes into collections, select and delete.
Code-looking notes get a highlighted code view instead of a plain text area.
"""

import streamlit as st

from dialogs import CODE_LANGUAGE, expand_note_dialog
from utils.code_detection import editor_kind
from utils.config import settings
from utils.model_schemas import Collection, Note
from utils.notes_db import (
    NotesDBError, add_note_to_collection, create_note, delete_note,
    get_collections, get_note_by_id, get_notes, update_note
)


def _content_key(note_id: int) -> str:
    return f"note_content_{note_id}"


def _hidden_key(note_id: int) -> str:
    return f"note_hidden_{note_id}"


def _select_key(note_id: int) -> str:
    return f"note_select_{note_id}"


# Callbacks
def _autosave(note_id: int) -> None:
    """
    Persist both fields of a note from their widgets. A field whose widget
    is not on screen keeps its stored value.
    """
    note = get_note_by_id(note_id)
    if note is None:
        return
    state = st.session_state
    content = state.get(_content_key(note_id), note.content)
    hidden = state.get(_hidden_key(note_id), note.hidden_content)
    update_note(note_id, content, hidden)


def _toggle_selected(note_id: int) -> None:
    selected = st.session_state.selected_note_ids
    if st.session_state.get(_select_key(note_id)):
        selected.add(note_id)
    else:
        selected.discard(note_id)


def _clear_selection() -> None:
    for note_id in st.session_state.selected_note_ids:
        st.session_state[_select_key(note_id)] = False
    st.session_state.selected_note_ids = set()


def render_notes_board() -> None:
    """
    Display the create form, the selection banner, and every note as a card.
    """
    st.markdown("<h2 style='text-align:center;'>Notes</h2>", unsafe_allow_html=True)

    render_create_note_form()

    # Selection banner
    selected = st.session_state.selected_note_ids
    if selected:
        count = len(selected)
        b_cols = st.columns([4, 1])
        b_cols[0].info(f"{count} note{'s' if count > 1 else ''} selected")
        b_cols[1].button("Clear selection", key="clear_selection_btn",
                         on_click=_clear_selection, use_container_width=True)

    st.text("")

    notes = get_notes()
    if not notes:
        st.info("No notes yet.")
        return

    collections = get_collections()
    columns = st.columns(settings.board_columns)
    for idx, note in enumerate(notes):
        with columns[idx % len(columns)]:
            render_note_card(note, collections)


def render_create_note_form() -> None:
    """
    Form for a new note; a blank submission is rejected.
    """
    with st.form("create_note_form", clear_on_submit=True):
        content = st.text_area(
            "New note",
            placeholder="What's on your mind?",
            height=100,
            label_visibility="collapsed",
        )
        submitted = st.form_submit_button("", type="secondary",
                                          icon=":material/add:", use_container_width=True)

    if submitted:
        if content.strip():
            create_note(content)
            st.success("Note added!")
        else:
            st.error("Please write something first.")


def render_note_card(note: Note, collections: list[Collection]) -> None:
    """
    One note card. The editor widget follows the note's current text,
    so it switches as soon as an edit makes the note look like code.
    """
    state = st.session_state
    content_key = _content_key(note.id)
    current = state.get(content_key, note.content)

    with st.container(border=True):
        st.checkbox("Select", key=_select_key(note.id),
                    on_change=_toggle_selected, args=(note.id,))

        if editor_kind(current) == "code":
            st.code(current, language=CODE_LANGUAGE)
            with st.expander("Edit", icon=":material/edit:"):
                st.text_area("Content", value=note.content, key=content_key,
                             height=200, label_visibility="collapsed",
                             on_change=_autosave, args=(note.id,))
        else:
            st.text_area("Content", value=note.content, key=content_key,
                         placeholder="What's on your mind?",
                         height=max(3, current.count("\n") + 1) * 28,
                         label_visibility="collapsed",
                         on_change=_autosave, args=(note.id,))

        # Hidden content, shown on demand
        if st.toggle("Hidden", key=f"note_show_hidden_{note.id}"):
            st.text_area("Hidden content", value=note.hidden_content,
                         key=_hidden_key(note.id),
                         placeholder="Answer revealed in flashcards",
                         on_change=_autosave, args=(note.id,))

        render_note_actions(note, collections)


def render_note_actions(note: Note, collections: list[Collection]) -> None:
    """Add-to-collection picker, expand and delete buttons under a card."""
    a_cols = st.columns([3, 1, 1, 1])

    names = {col.id: col.name for col in collections}
    chosen_id = a_cols[0].selectbox(
        "Collection",
        options=list(names),
        index=None,
        format_func=names.get,
        placeholder="Add to...",
        key=f"note_collection_{note.id}",
        label_visibility="collapsed",
    )

    if a_cols[1].button("", key=f"note_add_btn_{note.id}", type="secondary",
                        icon=":material/playlist_add:", use_container_width=True,
                        disabled=chosen_id is None):
        try:
            added = add_note_to_collection(note.id, chosen_id)
        except NotesDBError as e:
            st.error(str(e))
        else:
            if added:
                st.success(f"Added to {names[chosen_id]}")
            else:
                st.info(f"Already in {names[chosen_id]}")

    if a_cols[2].button("", key=f"note_expand_btn_{note.id}", type="secondary",
                        icon=":material/open_in_full:", use_container_width=True,
                        help="Expand"):
        expand_note_dialog(note.id)

    if a_cols[3].button("", key=f"note_delete_btn_{note.id}", type="secondary",
                        icon=":material/delete:", use_container_width=True):
        delete_note(note.id)
        st.session_state.selected_note_ids.discard(note.id)
        st.rerun()
