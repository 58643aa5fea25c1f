import time
from typing import Callable, Dict, Hashable


class TransientFlags:
    """Per-key flags that switch themselves off after a fixed duration."""

    def __init__(self, duration: float, clock: Callable[[], float] = time.monotonic):
        self._duration = duration
        self._clock = clock
        self._expires: Dict[Hashable, float] = {}

    def mark(self, key: Hashable) -> None:
        self._expires[key] = self._clock() + self._duration

    def is_set(self, key: Hashable) -> bool:
        expires_at = self._expires.get(key)
        if expires_at is None:
            return False
        if self._clock() >= expires_at:
            del self._expires[key]
            return False
        return True
