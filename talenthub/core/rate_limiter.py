import threading
import time


class InMemoryRateLimiter:
    """
    Fixed-window counter for the guarded routes. Keys are "<client-ip>:<path>",
    so each assessment's submit URL and each /functions/* endpoint gets its own
    budget per caller. Counts live in process memory and apply per worker.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._windows: dict[str, tuple[int, float]] = {}

    def allow(self, key: str, limit: int, window_seconds: int) -> tuple[bool, int]:
        """
        Count one request for key. Returns (allowed, retry_after_seconds).
        """
        now = time.monotonic()
        with self._lock:
            count, started = self._windows.get(key, (0, now))
            if now - started >= window_seconds:
                count, started = 0, now
            if count >= limit:
                return False, max(1, int(window_seconds - (now - started)))
            self._windows[key] = (count + 1, started)
            return True, 0

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()


rate_limiter = InMemoryRateLimiter()
