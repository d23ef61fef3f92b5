# flashcard_session.py

"""
Per-card quiz interaction for the flashcards view.

A FlashcardSession holds one card's prompt and expected answer, collects
the typed answer, judges it on the commit signal (Enter), and schedules
the automatic advance to the next card:
  - correct answers advance after CORRECT_ADVANCE_DELAY_MS
  - incorrect answers reveal the stored answer and advance after
    INCORRECT_ADVANCE_DELAY_MS, long enough to read it
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from utils.logger import logger
from utils.timers import ScheduledCall, Scheduler

CORRECT_ADVANCE_DELAY_MS = 700
INCORRECT_ADVANCE_DELAY_MS = 1500


class CardOutcome(str, Enum):
    PENDING = "pending"
    CORRECT = "correct"
    INCORRECT = "incorrect"


class FlashcardSession:
    """
    State machine for a single card: PENDING -> CORRECT | INCORRECT.

    The session is replaced, not reset, when the quiz moves on; once
    disposed it ignores every signal and its pending advance never fires.
    """

    def __init__(
        self,
        prompt: str,
        expected_answer: str | None,
        scheduler: Scheduler,
        on_advance: Callable[["FlashcardSession"], None] | None = None,
    ):
        self.prompt = prompt
        self.expected_answer = expected_answer if expected_answer is not None else ""
        self.user_input = ""
        self.outcome = CardOutcome.PENDING
        self.answer_revealed = False
        self.advance_requested = False
        self.disposed = False

        self._scheduler = scheduler
        self._on_advance = on_advance
        self._pending_advance: ScheduledCall | None = None

    # Observable signals
    @property
    def correct(self) -> bool:
        return self.outcome is CardOutcome.CORRECT

    @property
    def revealed_answer(self) -> str | None:
        """The stored answer, untrimmed, while it is revealed; else None."""
        return self.expected_answer if self.answer_revealed else None

    @property
    def answering(self) -> bool:
        return self.outcome is CardOutcome.PENDING and not self.disposed

    @property
    def advance_scheduled(self) -> bool:
        return self._pending_advance is not None and self._pending_advance.active

    # Input signals
    def update_input(self, value: str | None) -> None:
        if not self.answering:
            logger.debug("Ignoring input for a card that is no longer answering")
            return
        self.user_input = value or ""

    def commit(self) -> CardOutcome:
        """
        Judge the current input against the expected answer, comparing
        both with surrounding whitespace removed.
        """
        if not self.answering:
            return self.outcome

        if self.user_input.strip() == self.expected_answer.strip():
            self.outcome = CardOutcome.CORRECT
            delay = CORRECT_ADVANCE_DELAY_MS
        else:
            self.outcome = CardOutcome.INCORRECT
            self.answer_revealed = True
            delay = INCORRECT_ADVANCE_DELAY_MS

        logger.debug("Card judged %s; advancing in %sms", self.outcome.value, delay)
        self._pending_advance = self._scheduler.call_later(delay, self._advance)
        return self.outcome

    def dispose(self) -> None:
        """Cancel any scheduled advance and stop reacting to signals."""
        if self._pending_advance is not None:
            self._pending_advance.cancel()
            self._pending_advance = None
        self.disposed = True

    def _advance(self) -> None:
        if self.disposed:
            return
        self._pending_advance = None
        self.user_input = ""
        self.answer_revealed = False
        self.advance_requested = True
        if self._on_advance is not None:
            self._on_advance(self)
