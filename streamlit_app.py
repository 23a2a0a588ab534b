import streamlit as st

from wordscramble.config import DIFFICULTY_SETTINGS, Settings
from wordscramble.exceptions import EmptyGuess, RoundNotActive
from wordscramble.models import ERROR, LOADING
from wordscramble.monitoring import configure_logging
from wordscramble.session import GameSession

logger = configure_logging()

st.set_page_config(page_title="Word Scramble", page_icon="🔤", layout="centered")


class StreamlitObserver:
    """Collects round events into session_state for the next render."""

    def __init__(self, state):
        self.state = state

    def _flash(self, kind: str, text: str) -> None:
        self.state.setdefault("flash", []).append((kind, text))

    def on_round_start(self, scrambled_letters):
        logger.debug(f"Round started with {len(scrambled_letters)} letters")

    def on_timeout(self, correct_word):
        self._flash("warning", f"Time's up! The correct word was: {correct_word}")

    def on_correct(self, new_score):
        self._flash("success", "🎉 Correct! Well done.")

    def on_incorrect(self):
        self._flash("error", "Wrong! Try again.")

    def on_error(self, message):
        self._flash("error", message)


def get_session() -> GameSession:
    if "game" not in st.session_state:
        settings = Settings.from_env()
        game = GameSession(settings=settings, observer=StreamlitObserver(st.session_state))
        st.session_state.game = game
        game.start()
    return st.session_state.game


def on_difficulty_change():
    game = st.session_state.game
    game.change_difficulty(st.session_state.difficulty)
    # Changing difficulty restarts the game
    game.start()


def on_guess_submit():
    game = st.session_state.game
    try:
        game.submit_guess(st.session_state.get("guess_input", ""))
    except EmptyGuess as e:
        st.session_state.setdefault("flash", []).append(("warning", str(e)))
    except RoundNotActive:
        st.session_state.setdefault("flash", []).append(("info", "Resume the game to submit a guess."))


@st.fragment(run_every=1)
def timer_panel():
    game = st.session_state.game
    rounds_before = len(game.machine.history)
    game.pump()
    if len(game.machine.history) != rounds_before:
        # Timed out: a new word is on the board
        st.rerun()
    st.metric("Time left", f"{game.machine.time_left}s")


def main():
    st.title("Word Scramble 🔤")
    game = get_session()

    with st.sidebar:
        st.header("Game Settings")
        names = list(DIFFICULTY_SETTINGS)
        st.selectbox(
            "Difficulty",
            options=names,
            index=names.index(game.profile.name),
            key="difficulty",
            on_change=on_difficulty_change,
        )
        st.metric("Score", game.score)
        if st.button("Show hint"):
            st.info(game.hint())
        with st.expander("Rounds"):
            st.json(game.get_game_summary()["history"])

    for kind, text in st.session_state.pop("flash", []):
        getattr(st, kind)(text)

    if game.phase == ERROR:
        st.error(str(game.machine.error))
        if st.button("Reload words"):
            game.start()
            st.rerun()
        return
    if game.phase == LOADING or game.machine.round is None:
        st.write("Loading...")
        return

    st.markdown(f"## `{game.machine.round.scrambled_word}`")
    timer_panel()

    with st.form("guess_form", clear_on_submit=True):
        st.text_input("Your guess:", key="guess_input", disabled=not game.machine.accepts_guesses)
        st.form_submit_button("Check", on_click=on_guess_submit, disabled=not game.machine.accepts_guesses)

    col1, col2 = st.columns(2)
    with col1:
        st.button("Resume" if game.is_paused else "Pause", on_click=game.toggle_pause)
    with col2:
        st.button("Refresh", on_click=game.skip)


if __name__ == "__main__":
    main()
