# ABOUTME: Debounced save scheduling for metadata edits, one timer per record.
# ABOUTME: Coalesces rapid edits into a single trailing save after a short quiet period.

import logging
import threading
from collections.abc import Callable, Hashable

logger = logging.getLogger(__name__)

DEFAULT_SAVE_DELAY = 0.5

SaveFn = Callable[[], None]
ErrorHandler = Callable[[Hashable, Exception], None]


class SaveScheduler:
    """Runs the latest scheduled save for each key after ``delay`` seconds.

    Scheduling again for the same key restarts its timer, so a burst of
    edits results in one save. Different keys never affect each other.
    Saves run on timer threads; a failure is logged and passed to
    ``on_error`` so the caller can surface it.
    """

    def __init__(
        self,
        delay: float = DEFAULT_SAVE_DELAY,
        *,
        on_error: ErrorHandler | None = None,
    ) -> None:
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        self._delay = delay
        self._on_error = on_error
        self._lock = threading.Lock()
        self._timers: dict[Hashable, tuple[threading.Timer, SaveFn]] = {}

    def schedule(self, key: Hashable, save_fn: SaveFn) -> None:
        """Schedule save_fn for key, replacing any pending save for it."""
        timer = threading.Timer(self._delay, self._fire, args=(key,))
        timer.daemon = True
        with self._lock:
            previous = self._timers.get(key)
            if previous is not None:
                previous[0].cancel()
            self._timers[key] = (timer, save_fn)
        timer.start()

    def pending(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._timers

    def cancel(self, key: Hashable) -> bool:
        """Drop the pending save for key. Returns whether one was pending."""
        with self._lock:
            entry = self._timers.pop(key, None)
        if entry is None:
            return False
        entry[0].cancel()
        return True

    def flush(self, key: Hashable) -> bool:
        """Run the pending save for key now. Returns whether one ran.

        Unlike timer-driven saves, errors propagate to the caller.
        """
        with self._lock:
            entry = self._timers.pop(key, None)
        if entry is None:
            return False
        timer, save_fn = entry
        timer.cancel()
        save_fn()
        return True

    def shutdown(self) -> None:
        """Cancel every pending save."""
        with self._lock:
            entries = list(self._timers.values())
            self._timers.clear()
        for timer, _ in entries:
            timer.cancel()

    def _fire(self, key: Hashable) -> None:
        with self._lock:
            entry = self._timers.get(key)
            # A newer schedule() replaced this timer.
            if entry is None or entry[0] is not threading.current_thread():
                return
            del self._timers[key]
        _, save_fn = entry

        try:
            save_fn()
        except Exception as exc:
            logger.exception("Auto-save failed for %r", key)
            if self._on_error is not None:
                self._on_error(key, exc)
        else:
            logger.debug("Auto-saved %r", key)
