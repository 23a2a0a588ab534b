"""Error kinds raised by the scramble engine and round machine."""


class ScrambleGameError(Exception):
    """Base class for game errors."""


class WordLoadFailure(ScrambleGameError):
    """Word list could not be fetched or parsed, or produced no usable words."""


class PoolExhausted(ScrambleGameError):
    """No words available even after falling back to the built-in list."""


class EmptyGuess(ScrambleGameError, ValueError):
    """Submitted guess was empty after trimming."""


class RoundNotActive(ScrambleGameError):
    """Command arrived in a round state that does not accept it."""

    def __init__(self, state: str, command: str):
        super().__init__(f"Cannot {command} while round is {state}")
        self.state = state
        self.command = command
