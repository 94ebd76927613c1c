"""Frame timing."""

from dataclasses import dataclass

FRAME_RATE_SCALE = 60.0


@dataclass
class FrameClock:
    """Measures the time between frames in units of 1/60 second."""

    dt: float = 0.0
    last_time: float = 0.0

    def tick(self, now: float) -> float:
        """Record a frame at time ``now`` (seconds) and return the scaled delta."""
        self.dt = (now - self.last_time) * FRAME_RATE_SCALE
        self.last_time = now
        return self.dt