# ABOUTME: Unit tests for the debounced SaveScheduler.
# ABOUTME: Validates coalescing, per-key independence, flush/cancel, and error reporting.

import threading
import time

import pytest

from cnemeta.core.autosave import SaveScheduler
from cnemeta.metadata.model import CneMetadata
from cnemeta.metadata.types import CneFieldName, FieldVariant
from fakes import FakeRecord


class Counter:
    """Callable save stub that counts calls and signals each one."""

    def __init__(self) -> None:
        self.calls = 0
        self.called = threading.Event()

    def __call__(self) -> None:
        self.calls += 1
        self.called.set()


class TestSaveScheduler:
    """Tests for SaveScheduler."""

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(ValueError):
            SaveScheduler(delay=-1)

    def test_burst_coalesces_into_one_save(self) -> None:
        scheduler = SaveScheduler(delay=0.05)
        save = Counter()
        for _ in range(10):
            scheduler.schedule("record-1", save)

        assert save.called.wait(timeout=2)
        time.sleep(0.15)
        assert save.calls == 1
        assert scheduler.pending("record-1") is False

    def test_latest_save_fn_wins(self) -> None:
        scheduler = SaveScheduler(delay=0.05)
        first, second = Counter(), Counter()
        scheduler.schedule("k", first)
        scheduler.schedule("k", second)

        assert second.called.wait(timeout=2)
        time.sleep(0.1)
        assert first.calls == 0

    def test_keys_are_independent(self) -> None:
        scheduler = SaveScheduler(delay=0.05)
        a, b = Counter(), Counter()
        scheduler.schedule(1, a)
        scheduler.schedule(2, b)
        assert a.called.wait(timeout=2)
        assert b.called.wait(timeout=2)

    def test_cancel(self) -> None:
        scheduler = SaveScheduler(delay=0.05)
        save = Counter()
        scheduler.schedule("k", save)
        assert scheduler.cancel("k") is True
        time.sleep(0.15)
        assert save.calls == 0
        assert scheduler.cancel("k") is False

    def test_flush_runs_immediately(self) -> None:
        scheduler = SaveScheduler(delay=10)
        save = Counter()
        scheduler.schedule("k", save)
        assert scheduler.flush("k") is True
        assert save.calls == 1
        assert scheduler.flush("k") is False

    def test_flush_propagates_errors(self) -> None:
        def broken() -> None:
            raise RuntimeError("boom")

        scheduler = SaveScheduler(delay=10)
        scheduler.schedule("k", broken)
        with pytest.raises(RuntimeError, match="boom"):
            scheduler.flush("k")

    def test_timer_errors_go_to_handler(self) -> None:
        errors: list[tuple[object, Exception]] = []
        reported = threading.Event()

        def on_error(key: object, exc: Exception) -> None:
            errors.append((key, exc))
            reported.set()

        def broken() -> None:
            raise RuntimeError("disk full")

        scheduler = SaveScheduler(delay=0.01, on_error=on_error)
        scheduler.schedule("rec", broken)

        assert reported.wait(timeout=2)
        assert errors[0][0] == "rec"
        assert str(errors[0][1]) == "disk full"

    def test_shutdown_cancels_everything(self) -> None:
        scheduler = SaveScheduler(delay=0.05)
        a, b = Counter(), Counter()
        scheduler.schedule(1, a)
        scheduler.schedule(2, b)
        scheduler.shutdown()
        time.sleep(0.15)
        assert a.calls == 0
        assert b.calls == 0

    def test_debounced_model_save(self) -> None:
        """Rapid edits to a model end in one commit with the final value."""
        record = FakeRecord()
        metadata = CneMetadata(record)
        scheduler = SaveScheduler(delay=0.05)

        for value in ("清", "清代", "清代以來"):
            metadata.set_field_variant(CneFieldName.TITLE, FieldVariant.ORIGINAL, value)
            scheduler.schedule(id(record), metadata.save)

        deadline = time.monotonic() + 2
        while record.saves == 0 and time.monotonic() < deadline:
            time.sleep(0.01)
        time.sleep(0.1)

        assert record.saves == 1
        assert record.committed["extra"] == "cne-title-original: 清代以來"
