from __future__ import annotations

from collections import deque
import math
import time
from typing import Callable


class AttemptLimiter:
    """Counts attempts per action key in a trailing window, in memory.

    This is advisory throttling for form submissions. State is per process
    and is lost on restart, so it is not a security boundary.
    """

    def __init__(
        self,
        max_attempts: int = 5,
        window_ms: int = 15 * 60 * 1000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_attempts = max_attempts
        self.window_ms = window_ms
        self._clock = clock
        self._attempts: dict[str, deque[float]] = {}

    def _now_ms(self) -> float:
        return self._clock() * 1000

    def is_allowed(self, key: str) -> bool:
        now = self._now_ms()
        attempts = self._attempts.get(key, ())
        valid = deque(ts for ts in attempts if now - ts < self.window_ms)

        if len(valid) >= self.max_attempts:
            # Denials are not recorded, so polling while blocked does not extend the lockout.
            self._attempts[key] = valid
            return False

        valid.append(now)
        self._attempts[key] = valid
        return True

    def remaining_lockout_seconds(self, key: str) -> int:
        # Reads the stored list without pruning it first.
        attempts = self._attempts.get(key)
        if not attempts or len(attempts) < self.max_attempts:
            return 0

        remaining_ms = self.window_ms - (self._now_ms() - min(attempts))
        return max(0, math.ceil(remaining_ms / 1000))

    def attempt_count(self, key: str) -> int:
        return len(self._attempts.get(key, ()))

    def reset(self, key: str) -> None:
        self._attempts.pop(key, None)
