import random
import pytest

from wordscramble.config import DifficultyProfile
from wordscramble.models import WordEntry


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class FakeWordSource:
    def __init__(self, words=None):
        self.entries = [WordEntry(word=w, category="general") for w in (words or [])]
        self.invalidations = 0
        self.requests = []

    def fetch_words(self, min_len, max_len):
        self.requests.append((min_len, max_len))
        return list(self.entries)

    def invalidate(self):
        self.invalidations += 1


class RecordingObserver:
    def __init__(self):
        self.events = []

    def on_round_start(self, scrambled_letters):
        self.events.append(("round_start", "".join(scrambled_letters)))

    def on_tick(self, time_left):
        self.events.append(("tick", time_left))

    def on_timeout(self, correct_word):
        self.events.append(("timeout", correct_word))

    def on_correct(self, new_score):
        self.events.append(("correct", new_score))

    def on_incorrect(self):
        self.events.append(("incorrect", None))

    def on_error(self, message):
        self.events.append(("error", message))

    def names(self):
        return [name for name, _ in self.events]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def word_source():
    return FakeWordSource(["planet", "garden", "silver", "frozen", "market"])


@pytest.fixture
def quick_profile():
    return DifficultyProfile(
        name="quick",
        min_word_length=4,
        max_word_length=8,
        time_limit_seconds=3,
        scramble_complexity=1,
        preserve_first_last=False,
        extra_scrambling=False,
    )
