"""
Tests for the per-card quiz state machine

Tests cover:
- Whitespace-insensitive judging on commit
- Answer reveal on a wrong answer
- Asymmetric advance delays (700ms correct, 1500ms incorrect)
- Disposal cancelling the pending advance
"""

from utils.flashcard_session import (
    CORRECT_ADVANCE_DELAY_MS, INCORRECT_ADVANCE_DELAY_MS, CardOutcome, FlashcardSession
)


def make_session(scheduler, expected=" answer ", prompt="question?"):
    advanced = []
    session = FlashcardSession(prompt, expected, scheduler, on_advance=advanced.append)
    return session, advanced


class TestInitialState:

    def test_starts_answering(self, scheduler):
        session, _ = make_session(scheduler)
        assert session.outcome is CardOutcome.PENDING
        assert session.answering
        assert session.user_input == ""
        assert session.correct is False
        assert session.revealed_answer is None
        assert session.advance_requested is False
        assert scheduler.pending() == 0

    def test_input_change_does_not_judge(self, scheduler):
        session, _ = make_session(scheduler)
        session.update_input("ans")
        session.update_input("answer")
        assert session.user_input == "answer"
        assert session.outcome is CardOutcome.PENDING
        assert scheduler.pending() == 0


class TestCorrectAnswer:

    def test_trimmed_match_is_correct(self, scheduler):
        session, _ = make_session(scheduler, expected=" answer ")
        session.update_input("answer")
        assert session.commit() is CardOutcome.CORRECT
        assert session.correct is True
        assert session.revealed_answer is None

    def test_input_whitespace_ignored(self, scheduler):
        session, _ = make_session(scheduler, expected="Paris")
        session.update_input("  Paris\n")
        assert session.commit() is CardOutcome.CORRECT

    def test_comparison_is_case_sensitive(self, scheduler):
        session, _ = make_session(scheduler, expected="Paris")
        session.update_input("paris")
        assert session.commit() is CardOutcome.INCORRECT

    def test_advances_after_700ms(self, scheduler, clock):
        session, advanced = make_session(scheduler)
        session.update_input("answer")
        session.commit()

        assert scheduler.ms_until_next() == CORRECT_ADVANCE_DELAY_MS == 700
        clock.advance(699)
        scheduler.run_due()
        assert advanced == []
        assert session.user_input == "answer"

        clock.advance(1)
        scheduler.run_due()
        assert advanced == [session]
        assert session.advance_requested is True
        assert session.user_input == ""


class TestIncorrectAnswer:

    def test_reveals_untrimmed_expected_answer(self, scheduler):
        session, _ = make_session(scheduler, expected=" answer ")
        session.update_input("wrong")
        assert session.commit() is CardOutcome.INCORRECT
        assert session.correct is False
        assert session.revealed_answer == " answer "

    def test_advances_after_1500ms_and_hides_answer(self, scheduler, clock):
        session, advanced = make_session(scheduler)
        session.update_input("wrong")
        session.commit()

        assert scheduler.ms_until_next() == INCORRECT_ADVANCE_DELAY_MS == 1500
        clock.advance(1499)
        scheduler.run_due()
        assert advanced == []
        assert session.revealed_answer == " answer "

        clock.advance(1)
        scheduler.run_due()
        assert advanced == [session]
        assert session.revealed_answer is None
        assert session.user_input == ""

    def test_empty_commit_is_incorrect(self, scheduler):
        session, _ = make_session(scheduler, expected="something")
        assert session.commit() is CardOutcome.INCORRECT


class TestEmptyExpectedAnswer:
    """A missing answer is matched as the empty string, never an error."""

    def test_none_matches_blank_input(self, scheduler):
        session, _ = make_session(scheduler, expected=None)
        session.update_input("   ")
        assert session.commit() is CardOutcome.CORRECT

    def test_none_reveals_empty_string(self, scheduler):
        session, _ = make_session(scheduler, expected=None)
        session.update_input("guess")
        session.commit()
        assert session.revealed_answer == ""


class TestAfterJudgement:

    def test_outcomes_are_exclusive_and_terminal(self, scheduler):
        session, _ = make_session(scheduler)
        session.update_input("wrong")
        session.commit()

        session.update_input("answer")
        assert session.commit() is CardOutcome.INCORRECT
        assert session.user_input == "wrong"
        assert scheduler.pending() == 1

    def test_only_one_advance_scheduled(self, scheduler, clock):
        session, advanced = make_session(scheduler)
        session.update_input("answer")
        session.commit()
        session.commit()
        clock.advance(5000)
        scheduler.run_due()
        assert advanced == [session]


class TestDispose:

    def test_dispose_cancels_pending_advance(self, scheduler, clock):
        session, advanced = make_session(scheduler)
        session.update_input("answer")
        session.commit()
        assert session.advance_scheduled

        session.dispose()
        clock.advance(5000)
        assert scheduler.run_due() == 0
        assert advanced == []
        assert session.advance_requested is False
        assert session.user_input == "answer"

    def test_disposed_session_ignores_signals(self, scheduler):
        session, _ = make_session(scheduler)
        session.dispose()
        session.update_input("answer")
        assert session.commit() is CardOutcome.PENDING
        assert session.user_input == ""
        assert scheduler.pending() == 0

    def test_dispose_without_pending_advance(self, scheduler):
        session, _ = make_session(scheduler)
        session.dispose()
        assert session.disposed is True
