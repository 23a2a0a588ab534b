import time
import random
import logging
from collections import deque
from typing import Callable, Optional

from .config import Settings, get_profile
from .exceptions import ScrambleGameError
from .game_logic import RoundStateMachine
from .word_source import WordSource

logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns everything one player's session needs: settings, word source,
    round machine and the command queue.

    Commands go through dispatch(). A command issued while another is being
    handled (e.g. from an observer callback) is queued and runs after it, so
    no two transitions ever overlap.
    """

    COMMANDS = (
        "start",
        "submit_guess",
        "toggle_pause",
        "change_difficulty",
        "skip",
        "tick",
        "advance_clock",
    )

    def __init__(self, settings: Optional[Settings] = None, observer=None,
                 word_source: Optional[WordSource] = None, rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.settings = settings or Settings.from_env()
        self.word_source = word_source or WordSource.from_settings(self.settings)
        self.machine = RoundStateMachine(
            self.word_source,
            get_profile(self.settings.difficulty),
            observer=observer,
            rng=rng,
            pool_size=self.settings.pool_size,
            clock=clock,
        )
        self._queue = deque()
        self._draining = False

    @property
    def observer(self):
        return self.machine.observer

    @observer.setter
    def observer(self, value):
        self.machine.observer = value

    @property
    def profile(self):
        return self.machine.profile

    @property
    def score(self) -> int:
        return self.machine.score

    @property
    def phase(self) -> str:
        return self.machine.phase

    @property
    def is_paused(self) -> bool:
        return self.machine.is_paused

    def dispatch(self, command: str, *args):
        """
        Run a command, or queue it if another command is being handled.

        Returns the result of ``command`` when it ran immediately, else None.
        Only the caller's own command raises; a failing deferred command is
        logged and the rest of the queue still runs.
        """
        if command not in self.COMMANDS:
            raise ValueError(f"Unknown command '{command}'")
        if self._draining:
            self._queue.append((command, args))
            logger.debug(f"[QUEUE] deferred {command}")
            return None

        self._draining = True
        try:
            result = getattr(self.machine, command)(*args)
            while self._queue:
                name, call_args = self._queue.popleft()
                try:
                    getattr(self.machine, name)(*call_args)
                except (ScrambleGameError, ValueError) as e:
                    # Nobody is waiting on a deferred command
                    logger.warning(f"[QUEUE] deferred {name} failed: {e}")
        finally:
            self._queue.clear()
            self._draining = False
        return result

    def start(self) -> bool:
        return self.dispatch("start")

    def submit_guess(self, text: str) -> bool:
        return self.dispatch("submit_guess", text)

    def toggle_pause(self) -> bool:
        return self.dispatch("toggle_pause")

    def change_difficulty(self, name: str):
        return self.dispatch("change_difficulty", name)

    def skip(self) -> bool:
        return self.dispatch("skip")

    def pump(self, now: Optional[float] = None) -> int:
        """Deliver timer ticks that have come due since the last pump."""
        return self.dispatch("advance_clock", now)

    def hint(self) -> str:
        return self.machine.hint()

    def get_game_summary(self):
        return self.machine.get_game_summary()
