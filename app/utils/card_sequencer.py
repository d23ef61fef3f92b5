# card_sequencer.py

"""
Round-robin sequencing of a collection's notes for the flashcards view.
The sequencer is the view-model kept in st.session_state: it owns the
note list, the current index, the live FlashcardSession and the score.
"""

from __future__ import annotations

from typing import Sequence

from utils.flashcard_session import CardOutcome, FlashcardSession
from utils.logger import logger
from utils.model_schemas import Note
from utils.timers import Scheduler


class CardSequencer:
    """
    Steps through notes in order, wrapping back to the first one after
    the last, and swaps in a fresh FlashcardSession for every card.
    """

    def __init__(self, notes: Sequence[Note], scheduler: Scheduler):
        self.notes = list(notes)
        self.scheduler = scheduler
        self.current_idx = 0
        self.turn = 0
        self.correct_count = 0
        self.incorrect_count = 0
        self.disposed = False
        self.session: FlashcardSession | None = self._new_session()

    @property
    def current_note(self) -> Note | None:
        if not self.notes:
            return None
        return self.notes[self.current_idx]

    def position_label(self) -> str:
        if not self.notes:
            return "0 / 0"
        return f"{self.current_idx + 1} / {len(self.notes)}"

    def submit(self, answer: str) -> CardOutcome | None:
        """
        Forward the typed answer and the commit signal to the current card.
        Each card is scored once, on the commit that judges it.
        """
        if self.disposed or self.session is None:
            return None

        was_answering = self.session.answering
        self.session.update_input(answer)
        outcome = self.session.commit()

        if was_answering:
            if outcome is CardOutcome.CORRECT:
                self.correct_count += 1
            elif outcome is CardOutcome.INCORRECT:
                self.incorrect_count += 1
        return outcome

    def advance(self) -> None:
        """Move to (current_idx + 1) mod len(notes) with a fresh session."""
        if self.disposed:
            return
        if self.session is not None:
            self.session.dispose()

        if self.notes:
            self.current_idx = (self.current_idx + 1) % len(self.notes)
        else:
            self.current_idx = 0
        self.session = self._new_session()

    def dispose(self) -> None:
        """Tear down: cancel the pending advance; later signals are ignored."""
        if self.session is not None:
            self.session.dispose()
        self.disposed = True
        logger.debug("Flashcard sequencer disposed at %s", self.position_label())

    def _new_session(self) -> FlashcardSession | None:
        note = self.current_note
        if note is None:
            return None
        self.turn += 1
        return FlashcardSession(
            note.content,
            note.hidden_content,
            self.scheduler,
            on_advance=self._on_session_advance,
        )

    def _on_session_advance(self, session: FlashcardSession) -> None:
        # Only the live session may move the quiz forward
        if self.disposed or session is not self.session:
            return
        self.advance()
