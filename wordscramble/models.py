from dataclasses import dataclass
from typing import Dict, List, Optional

# Round phases
IDLE = "idle"
LOADING = "loading"
ACTIVE = "active"
PAUSED = "paused"
SOLVED = "solved"
TIMED_OUT = "timed_out"
ERROR = "error"

# Round outcomes recorded in history
OUTCOME_SOLVED = "solved"
OUTCOME_TIMED_OUT = "timed_out"
OUTCOME_SKIPPED = "skipped"


@dataclass(frozen=True)
class WordEntry:
    word: str
    category: Optional[str] = None


@dataclass
class RoundState:
    original_word: str
    scrambled_letters: List[str]
    time_left: int
    category: Optional[str] = None
    is_paused: bool = False
    guesses_made: int = 0

    @property
    def scrambled_word(self) -> str:
        return "".join(self.scrambled_letters)


@dataclass
class RoundRecord:
    round_number: int
    word: str
    category: Optional[str]
    outcome: str
    guesses_made: int
    seconds_used: int
    difficulty: str

    def to_dict(self) -> Dict:
        return {
            "round": self.round_number,
            "word": self.word,
            "category": self.category,
            "outcome": self.outcome,
            "guesses_made": self.guesses_made,
            "seconds_used": self.seconds_used,
            "difficulty": self.difficulty,
        }


@dataclass
class LoadTicket:
    """Identifies one word-load request; only the newest one may be applied."""
    number: int
    bounds: tuple = (0, 0)
