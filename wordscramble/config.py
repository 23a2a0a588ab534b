"""
Configuration for the Word Scramble game.
Difficulty profiles are fixed; runtime settings come from the environment
(optionally a .env file next to the project root).
"""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

POOL_SIZE = 10
DEFAULT_DIFFICULTY = "medium"


@dataclass(frozen=True)
class DifficultyProfile:
    name: str
    min_word_length: int
    max_word_length: int
    time_limit_seconds: int
    scramble_complexity: float
    preserve_first_last: bool
    extra_scrambling: bool

    def __post_init__(self):
        if self.min_word_length > self.max_word_length:
            raise ValueError(
                f"Profile '{self.name}': min_word_length {self.min_word_length} "
                f"exceeds max_word_length {self.max_word_length}"
            )
        if self.scramble_complexity < 0:
            raise ValueError(f"Profile '{self.name}': scramble_complexity must be >= 0")

    @property
    def bounds(self):
        return (self.min_word_length, self.max_word_length)


DIFFICULTY_SETTINGS: Dict[str, DifficultyProfile] = {
    "easy": DifficultyProfile(
        name="easy",
        min_word_length=3,
        max_word_length=5,
        time_limit_seconds=60,
        scramble_complexity=0.5,
        preserve_first_last=True,
        extra_scrambling=False,
    ),
    "medium": DifficultyProfile(
        name="medium",
        min_word_length=4,
        max_word_length=7,
        time_limit_seconds=45,
        scramble_complexity=1,
        preserve_first_last=False,
        extra_scrambling=False,
    ),
    "hard": DifficultyProfile(
        name="hard",
        min_word_length=6,
        max_word_length=12,
        time_limit_seconds=30,
        scramble_complexity=2,
        preserve_first_last=False,
        extra_scrambling=True,
    ),
}


def get_profile(name: str) -> DifficultyProfile:
    """Look up a difficulty profile by name (case-insensitive)."""
    key = str(name or "").strip().lower()
    if key not in DIFFICULTY_SETTINGS:
        raise ValueError(
            f"Unknown difficulty '{name}'. "
            f"Choose one of: {', '.join(DIFFICULTY_SETTINGS)}"
        )
    return DIFFICULTY_SETTINGS[key]


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {name}={raw!r}, using default {default}")
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid number for {name}={raw!r}, using default {default}")
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class Settings:
    word_list: Optional[str] = None
    use_remote_words: bool = True
    pool_size: int = POOL_SIZE
    difficulty: str = DEFAULT_DIFFICULTY
    fetch_timeout: float = 10
    max_retries: int = 3
    initial_backoff: float = 1
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        difficulty = os.getenv('SCRAMBLE_DIFFICULTY', DEFAULT_DIFFICULTY).strip().lower()
        if difficulty not in DIFFICULTY_SETTINGS:
            logger.warning(f"Unknown SCRAMBLE_DIFFICULTY '{difficulty}', using '{DEFAULT_DIFFICULTY}'")
            difficulty = DEFAULT_DIFFICULTY
        return cls(
            word_list=os.getenv('SCRAMBLE_WORD_LIST') or None,
            use_remote_words=_env_bool('SCRAMBLE_USE_REMOTE_WORDS', True),
            pool_size=max(1, _env_int('SCRAMBLE_POOL_SIZE', POOL_SIZE)),
            difficulty=difficulty,
            fetch_timeout=_env_float('SCRAMBLE_FETCH_TIMEOUT', 10),
            max_retries=max(0, _env_int('SCRAMBLE_MAX_RETRIES', 3)),
            initial_backoff=_env_float('SCRAMBLE_INITIAL_BACKOFF', 1),
            log_level=os.getenv('LOG_LEVEL', 'INFO').strip().upper(),
        )
