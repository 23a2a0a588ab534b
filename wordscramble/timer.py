import time
from typing import Callable, Optional


class CountdownTimer:
    """
    One-second countdown for a single round.

    The timer does not run a thread. The host either calls tick() once per
    second or calls poll() whenever it gets control, which reports how many
    whole seconds have elapsed since the last tick. Time spent paused is not
    counted.
    """

    TICK_SECONDS = 1.0

    def __init__(self, seconds: int, clock: Callable[[], float] = time.monotonic):
        self.remaining = int(seconds)
        self.clock = clock
        self.paused = False
        self.cancelled = False
        self._last_tick_at: Optional[float] = None
        self._elapsed_at_pause = 0.0

    @property
    def active(self) -> bool:
        return not self.cancelled and self.remaining > 0

    def start(self) -> None:
        self._last_tick_at = self.clock()

    def pause(self) -> None:
        if self.paused or self.cancelled:
            return
        self.paused = True
        if self._last_tick_at is not None:
            self._elapsed_at_pause = max(0.0, self.clock() - self._last_tick_at)

    def resume(self) -> None:
        if not self.paused or self.cancelled:
            return
        self.paused = False
        if self._last_tick_at is not None:
            self._last_tick_at = self.clock() - self._elapsed_at_pause
        self._elapsed_at_pause = 0.0

    def cancel(self) -> None:
        self.cancelled = True

    def tick(self) -> bool:
        """Advance one second. Returns True if the tick counted."""
        if self.cancelled or self.paused or self.remaining <= 0:
            return False
        self.remaining -= 1
        return True

    def poll(self, now: Optional[float] = None) -> int:
        """Number of whole ticks due since the last one; the caller applies them."""
        if self.cancelled or self.paused or self._last_tick_at is None:
            return 0
        now = self.clock() if now is None else now
        due = int((now - self._last_tick_at) // self.TICK_SECONDS)
        due = max(0, min(due, self.remaining))
        if due:
            self._last_tick_at += due * self.TICK_SECONDS
        return due
