import pytest
from unittest.mock import patch

from wordscramble.config import Settings
from wordscramble.exceptions import EmptyGuess
from wordscramble.models import ACTIVE
from wordscramble.session import GameSession


@pytest.fixture
def session(word_source, observer, rng, clock):
    return GameSession(settings=Settings(use_remote_words=False), observer=observer,
                       word_source=word_source, rng=rng, clock=clock)


@pytest.mark.unit
def test_session_commands(session, observer):
    assert session.start() is True
    assert session.phase == ACTIVE
    assert session.profile.name == "medium"
    assert session.submit_guess("nope") is False
    word = session.machine.round.original_word
    assert session.submit_guess(word) is True
    assert session.score == 1
    assert observer.names() == ["round_start", "incorrect", "correct", "round_start"]


@pytest.mark.unit
def test_unknown_command(session):
    with pytest.raises(ValueError):
        session.dispatch("cheat")


@pytest.mark.unit
def test_commands_from_callbacks_run_after_current_one(session, observer):
    class PauseOnCorrect:
        def __init__(self):
            self.paused_result = "not called"

        def on_correct(self, new_score):
            # Runs while the round is between solved and the next start
            self.paused_result = session.dispatch("toggle_pause")

    pauser = PauseOnCorrect()
    session.observer = pauser
    session.start()
    assert session.submit_guess(session.machine.round.original_word) is True
    # Deferred, then applied to the freshly started round
    assert pauser.paused_result is None
    assert session.is_paused


@pytest.mark.unit
def test_errors_propagate_and_queue_recovers(session):
    session.start()
    with pytest.raises(EmptyGuess):
        session.submit_guess("")
    assert session.toggle_pause() is True


@pytest.mark.unit
def test_failing_deferred_command_does_not_leak(session, observer):
    class BadGuessOnCorrect:
        def on_correct(self, new_score):
            session.dispatch("submit_guess", "")
            session.dispatch("toggle_pause")

    session.observer = BadGuessOnCorrect()
    session.start()
    # The correct guess itself succeeded, so its caller sees no error
    assert session.submit_guess(session.machine.round.original_word) is True
    assert session.score == 1
    # The queue kept draining past the failed command
    assert session.is_paused
    assert not session._queue

    session.observer = observer
    assert session.skip() is True
    assert session.phase == ACTIVE
    assert observer.names() == ["round_start"]


@pytest.mark.unit
def test_pump_delivers_due_ticks(session, observer, clock):
    session.start()
    clock.now = 2.0
    assert session.pump() == 2
    assert observer.events[-1] == ("tick", 43)


@pytest.mark.unit
def test_change_difficulty_and_skip(session, word_source):
    session.start()
    session.change_difficulty("easy")
    assert word_source.invalidations == 1
    session.skip()
    assert word_source.requests[-1] == (3, 5)
    assert session.machine.time_left == 60


@pytest.mark.unit
def test_hint_and_summary(session):
    session.start()
    assert session.hint()
    summary = session.get_game_summary()
    assert summary["phase"] == ACTIVE
    assert summary["scrambled_word"] == session.machine.round.scrambled_word


@pytest.mark.unit
def test_session_with_builtin_words(rng):
    with patch.dict('os.environ', {'SCRAMBLE_DIFFICULTY': 'hard', 'SCRAMBLE_USE_REMOTE_WORDS': 'false'}):
        game = GameSession(settings=Settings.from_env(), rng=rng)
    with patch("wordscramble.word_source.requests.get") as mock_get:
        game.start()
    mock_get.assert_not_called()
    assert game.profile.name == "hard"
    assert 6 <= len(game.machine.round.original_word) <= 12
