"""A countdown timer driven by explicit time steps."""

from __future__ import annotations


class Timer:
    """Tracks elapsed time against a duration, either once or repeating."""

    def __init__(self, duration: float, repeating: bool) -> None:
        if duration < 0:
            raise ValueError(f"timer duration must not be negative, got {duration}")
        self.duration = float(duration)
        self.repeating = bool(repeating)
        self.elapsed = 0.0
        self.times_finished_this_tick = 0
        self._finished = False

    def __repr__(self) -> str:
        mode = "repeating" if self.repeating else "once"
        return f"Timer(duration={self.duration}, {mode}, elapsed={self.elapsed})"

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds."""
        if delta < 0:
            raise ValueError(f"cannot tick a timer by a negative delta, got {delta}")

        if self._finished and not self.repeating:
            self.times_finished_this_tick = 0
            return self

        self.elapsed += delta
        self._finished = self.elapsed >= self.duration

        if not self._finished:
            self.times_finished_this_tick = 0
        elif not self.repeating:
            self.times_finished_this_tick = 1
            self.elapsed = self.duration
        elif self.duration > 0:
            laps, self.elapsed = divmod(self.elapsed, self.duration)
            self.times_finished_this_tick = int(laps)
        else:
            self.times_finished_this_tick = 1
            self.elapsed = 0.0
        return self

    def finished(self) -> bool:
        """True once the duration has been reached.

        A repeating timer reports this only on the tick that completed it.
        """
        return self._finished

    def just_finished(self) -> bool:
        """True if the last tick completed the timer at least once."""
        return self.times_finished_this_tick > 0

    def reset(self) -> None:
        """Start the timer over from zero."""
        self.elapsed = 0.0
        self.times_finished_this_tick = 0
        self._finished = False