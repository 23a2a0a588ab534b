import time
import random
import logging
from typing import Callable, Dict, List, Optional

from .config import POOL_SIZE, DifficultyProfile, get_profile
from .exceptions import EmptyGuess, PoolExhausted, RoundNotActive
from .hints import hint
from .models import (
    IDLE, LOADING, ACTIVE, PAUSED, SOLVED, TIMED_OUT, ERROR,
    OUTCOME_SOLVED, OUTCOME_TIMED_OUT, OUTCOME_SKIPPED,
    LoadTicket, RoundRecord, RoundState, WordEntry,
)
from .sampler import WordSampler
from .scrambler import scramble
from .timer import CountdownTimer
from .word_source import WordSource

logger = logging.getLogger(__name__)

POOL_EXHAUSTED_MESSAGE = "Error! Could not load words. Please reload to try again."


class RoundStateMachine:
    """
    Runs the play rounds of one session.

    The machine has no UI dependency. It reports through an observer object
    that may implement any of: on_round_start(scrambled_letters),
    on_tick(time_left), on_timeout(correct_word), on_correct(new_score),
    on_incorrect(), on_error(message). Missing callbacks are skipped.
    """

    def __init__(self, word_source: WordSource, profile: DifficultyProfile, observer=None,
                 sampler: Optional[WordSampler] = None, rng: Optional[random.Random] = None,
                 pool_size: int = POOL_SIZE, clock: Callable[[], float] = time.monotonic):
        self.word_source = word_source
        self.profile = profile
        self.observer = observer
        self.rng = rng or random.Random()
        self.sampler = sampler or WordSampler(self.rng)
        self.pool_size = pool_size
        self.clock = clock

        self.phase = IDLE
        self.score = 0
        self.time_left = profile.time_limit_seconds
        self.round: Optional[RoundState] = None
        self.timer: Optional[CountdownTimer] = None
        self.pool: List[WordEntry] = []
        self.history: List[RoundRecord] = []
        self.error: Optional[PoolExhausted] = None

        self._tickets_issued = 0
        self._pending_ticket: Optional[int] = None
        self._round_profile = profile

    @property
    def is_paused(self) -> bool:
        return self.phase == PAUSED

    @property
    def accepts_guesses(self) -> bool:
        return self.phase == ACTIVE

    def _notify(self, name: str, *args) -> None:
        callback = getattr(self.observer, name, None)
        if callable(callback):
            callback(*args)

    def _cancel_timer(self) -> None:
        if self.timer is not None:
            self.timer.cancel()
            self.timer = None

    # -------------------------
    # Loading
    # -------------------------

    def begin_load(self) -> LoadTicket:
        """Enter loading and issue a ticket; any earlier ticket becomes stale."""
        self._cancel_timer()
        self._tickets_issued += 1
        ticket = LoadTicket(number=self._tickets_issued, bounds=self.profile.bounds)
        self._pending_ticket = ticket.number
        self.phase = LOADING
        self.round = None
        self.error = None
        self.time_left = self.profile.time_limit_seconds
        logger.info(f"[LOAD] ticket={ticket.number} difficulty={self.profile.name} bounds={ticket.bounds}")
        return ticket

    def load_pool(self, ticket: LoadTicket) -> List[WordEntry]:
        min_len, max_len = ticket.bounds
        candidates = self.word_source.fetch_words(min_len, max_len)
        return self.sampler.sample(candidates, self.pool_size)

    def deliver_pool(self, ticket: LoadTicket, entries: List[WordEntry]) -> bool:
        """
        Apply a loaded pool and start the round.

        Returns False if the ticket was superseded by a newer load; its
        result is discarded.
        """
        if ticket.number != self._pending_ticket:
            logger.info(f"[LOAD-DISCARD] ticket={ticket.number} superseded by {self._pending_ticket}")
            return False
        self._pending_ticket = None

        self.pool = list(entries)
        entry = self.sampler.choose(self.pool)
        if entry is None:
            self.phase = ERROR
            self.error = PoolExhausted(POOL_EXHAUSTED_MESSAGE)
            logger.error(f"[POOL-EXHAUSTED] difficulty={self.profile.name} bounds={ticket.bounds}")
            self._notify("on_error", str(self.error))
            return True

        letters = scramble(entry.word, self.profile, self.rng)
        self._round_profile = self.profile
        self.time_left = self.profile.time_limit_seconds
        self.round = RoundState(
            original_word=entry.word,
            scrambled_letters=letters,
            time_left=self.time_left,
            category=entry.category,
        )
        self.timer = CountdownTimer(self.time_left, clock=self.clock)
        self.timer.start()
        self.phase = ACTIVE
        logger.info(f"[ROUND-START] round={len(self.history) + 1} difficulty={self.profile.name} length={len(entry.word)}")
        self._notify("on_round_start", list(letters))
        return True

    def start(self) -> bool:
        ticket = self.begin_load()
        entries = self.load_pool(ticket)
        return self.deliver_pool(ticket, entries)

    # -------------------------
    # Clock
    # -------------------------

    def tick(self) -> None:
        if self.phase != ACTIVE or self.timer is None:
            return
        if not self.timer.tick():
            return
        self.time_left = self.timer.remaining
        self.round.time_left = self.time_left
        self._notify("on_tick", self.time_left)
        if self.time_left <= 0:
            self._time_out()

    def advance_clock(self, now: Optional[float] = None) -> int:
        """Apply every whole tick that is due by ``now``."""
        timer = self.timer
        if timer is None or self.phase != ACTIVE:
            return 0
        due = timer.poll(now)
        applied = 0
        for _ in range(due):
            # A timeout starts a new round with a fresh timer
            if self.timer is not timer:
                break
            self.tick()
            applied += 1
        return applied

    def _time_out(self) -> None:
        word = self.round.original_word
        self._cancel_timer()
        self.phase = TIMED_OUT
        self._record(OUTCOME_TIMED_OUT)
        logger.info(f"[TIMEOUT] word='{word}'")
        self._notify("on_timeout", word)
        self.start()

    # -------------------------
    # Commands
    # -------------------------

    def submit_guess(self, text: str) -> bool:
        """Check a guess against the current word. Returns True when it matches."""
        if self.phase != ACTIVE:
            raise RoundNotActive(self.phase, "submit a guess")
        guess = (text or "").strip()
        if not guess:
            raise EmptyGuess("Please enter a word!")

        self.round.guesses_made += 1
        if guess.lower() != self.round.original_word.lower():
            logger.debug(f"[GUESS] incorrect attempt {self.round.guesses_made}")
            self._notify("on_incorrect")
            return False

        self.score += 1
        self._cancel_timer()
        self.phase = SOLVED
        self._record(OUTCOME_SOLVED)
        logger.info(f"[SOLVED] score={self.score}")
        self._notify("on_correct", self.score)
        self.start()
        return True

    def toggle_pause(self) -> bool:
        if self.phase == ACTIVE:
            self.phase = PAUSED
            if self.timer is not None:
                self.timer.pause()
        elif self.phase == PAUSED:
            self.phase = ACTIVE
            if self.timer is not None:
                self.timer.resume()
        else:
            raise RoundNotActive(self.phase, "pause")
        self.round.is_paused = self.is_paused
        logger.debug(f"[PAUSE] paused={self.is_paused}")
        return self.is_paused

    def change_difficulty(self, name: str) -> DifficultyProfile:
        """
        Switch profile for the next round.

        The current word stays in play but its timer is cancelled; the
        caller restarts when ready.
        """
        profile = get_profile(name)
        self.profile = profile
        self.word_source.invalidate()
        self._cancel_timer()
        if self.phase == LOADING:
            # The in-flight load used the old bounds
            self._pending_ticket = None
            self.phase = IDLE
        self.time_left = profile.time_limit_seconds
        logger.info(f"[DIFFICULTY] now={profile.name} time_limit={profile.time_limit_seconds}s")
        self._notify("on_tick", self.time_left)
        return profile

    def skip(self) -> bool:
        """Abandon the current round, if any, and start another."""
        if self.round is not None and self.phase in (ACTIVE, PAUSED):
            self._record(OUTCOME_SKIPPED)
            logger.info(f"[SKIP] word='{self.round.original_word}'")
        return self.start()

    # -------------------------
    # Reporting
    # -------------------------

    def hint(self) -> str:
        if self.round is None:
            return ""
        return hint(self.round.original_word)

    def _record(self, outcome: str) -> None:
        limit = self._round_profile.time_limit_seconds
        self.history.append(RoundRecord(
            round_number=len(self.history) + 1,
            word=self.round.original_word,
            category=self.round.category,
            outcome=outcome,
            guesses_made=self.round.guesses_made,
            seconds_used=max(0, limit - self.round.time_left),
            difficulty=self._round_profile.name,
        ))

    def get_game_summary(self) -> Dict:
        """Get a summary of the session so far."""
        outcomes = [r.outcome for r in self.history]
        return {
            "score": self.score,
            "difficulty": self.profile.name,
            "phase": self.phase,
            "time_left": self.time_left,
            "rounds_played": len(self.history),
            "rounds_solved": outcomes.count(OUTCOME_SOLVED),
            "rounds_timed_out": outcomes.count(OUTCOME_TIMED_OUT),
            "rounds_skipped": outcomes.count(OUTCOME_SKIPPED),
            "scrambled_word": self.round.scrambled_word if self.round else None,
            # Only finished rounds reveal their word
            "last_word": self.history[-1].word if self.history else None,
            "history": [r.to_dict() for r in self.history],
        }
