# flashcards.py

"""
Flashcard quiz over a collection's notes within the Notecards Streamlit app.
The visible side of each note is the prompt, its hidden content the answer.
Typed answers are judged on Enter; the view then waits out the advance
delay and moves to the next card, cycling back after the last one.
"""

import time

import pandas as pd
import streamlit as st

from utils.card_sequencer import CardSequencer
from utils.code_detection import is_code_like
from utils.flashcard_session import FlashcardSession
from utils.logger import logger
from utils.notes_db import get_collection_note_counts, get_notes_for_collection
from utils.timers import Scheduler

CODE_LANGUAGE = "javascript"


def start_flashcard_quiz(collection_id: int) -> None:
    """
    Replace any running quiz with a fresh one over the given collection.
    """
    end_flashcard_quiz()

    scheduler = Scheduler()
    notes = get_notes_for_collection(collection_id)
    st.session_state.update(
        flashcard_collection_id=collection_id,
        flashcard_scheduler=scheduler,
        flashcard_sequencer=CardSequencer(notes, scheduler),
    )
    logger.info("Started flashcards for collection %s (%d notes)", collection_id, len(notes))


def end_flashcard_quiz() -> None:
    """
    Tear down the running quiz so no pending advance can fire afterwards.
    """
    state = st.session_state
    sequencer = state.get("flashcard_sequencer")
    if sequencer is not None:
        sequencer.dispose()
    scheduler = state.get("flashcard_scheduler")
    if scheduler is not None:
        scheduler.cancel_all()
    state.update(
        flashcard_collection_id=None,
        flashcard_scheduler=None,
        flashcard_sequencer=None,
    )


def _submit_answer(input_key: str) -> None:
    sequencer = st.session_state.get("flashcard_sequencer")
    if sequencer is not None:
        sequencer.submit(st.session_state.get(input_key, ""))


def render_flashcards_page() -> None:
    """
    Collection picker followed by the current card of the running quiz.
    """
    st.markdown("<h2 style='text-align:center;'>Flashcards</h2>", unsafe_allow_html=True)

    summaries = get_collection_note_counts()
    if not summaries:
        st.info("No collections yet. Create one from the sidebar.")
        return

    df_collections = pd.DataFrame([
        {"id": s.id, "Collection": s.name, "Notes": s.note_count}
        for s in summaries
    ])

    # Single-row picker; on_select="rerun" reruns as soon as a row is clicked
    picker = st.dataframe(
        df_collections,
        column_config={"id": None},
        use_container_width=True,
        hide_index=True,
        key="flashcard_collections_df",
        on_select="rerun",
        selection_mode="single-row",
    )
    rows = picker.selection.rows
    chosen_id = int(df_collections.iloc[rows[0]]["id"]) if rows else None

    if chosen_id != st.session_state.flashcard_collection_id:
        if chosen_id is None:
            end_flashcard_quiz()
        else:
            start_flashcard_quiz(chosen_id)

    sequencer = st.session_state.flashcard_sequencer
    if sequencer is None:
        st.markdown("<h3 style='text-align:center;'>Choose a collection.</h3>", unsafe_allow_html=True)
        return
    if not sequencer.notes:
        st.info("No notes in this collection.")
        return

    st.divider()
    render_flashcard(sequencer)
    wait_for_advance(st.session_state.flashcard_scheduler)


def render_flashcard(sequencer: CardSequencer) -> None:
    """
    Show the prompt, the answer input, the judgement, and the quiz position.
    """
    session = sequencer.session

    with st.container(border=True):
        render_prompt(session)

    # Each card instance gets its own form, so the input starts empty
    input_key = f"flashcard_answer_{sequencer.turn}"
    with st.form(f"flashcard_form_{sequencer.turn}", border=False):
        st.text_input(
            "Answer",
            key=input_key,
            placeholder="Type the answer and press Enter...",
            disabled=not session.answering,
            label_visibility="collapsed",
        )
        st.form_submit_button(
            "Check", on_click=_submit_answer, args=(input_key,),
            disabled=not session.answering, use_container_width=True,
        )

    if session.correct:
        st.success("Correct!")
    elif session.revealed_answer is not None:
        st.error("Correct answer:")
        st.code(session.revealed_answer, language=None)

    stats_row = st.columns([1, 1, 1])
    stats_row[0].markdown(f"<p style='text-align:center;'>{sequencer.position_label()}</p>", unsafe_allow_html=True)
    stats_row[1].markdown(f"<p style='text-align:center; color:lime'>Correct: {sequencer.correct_count}</p>", unsafe_allow_html=True)
    stats_row[2].markdown(f"<p style='text-align:center; color:red'>Incorrect: {sequencer.incorrect_count}</p>", unsafe_allow_html=True)


def render_prompt(session: FlashcardSession) -> None:
    if is_code_like(session.prompt):
        st.code(session.prompt, language=CODE_LANGUAGE)
    else:
        # Raw text; note content is never interpreted as markdown or HTML
        st.text(session.prompt)


def wait_for_advance(scheduler: Scheduler | None) -> None:
    """
    Sleep until the next scheduled advance, fire it, and rerun to show
    the next card. Does nothing while a card is still being answered.
    """
    if scheduler is None:
        return
    wait_ms = scheduler.ms_until_next()
    if wait_ms is None:
        return

    time.sleep(wait_ms / 1000)
    scheduler.run_due()
    st.rerun()
