from __future__ import annotations

from cvd_platform.domain.services.record_ids import MonotonicIdFactory


def test_ids_follow_the_clock() -> None:
    ticks = iter([1000, 2000])
    factory = MonotonicIdFactory(clock_ms=lambda: next(ticks))

    assert factory.next_id() == "1000"
    assert factory.next_id() == "2000"


def test_same_millisecond_is_bumped() -> None:
    factory = MonotonicIdFactory(clock_ms=lambda: 1000)

    ids = [factory.next_id() for _ in range(3)]

    assert ids == ["1000", "1001", "1002"]


def test_clock_going_backwards_never_repeats() -> None:
    ticks = iter([5000, 4000])
    factory = MonotonicIdFactory(clock_ms=lambda: next(ticks))

    assert factory.next_id() == "5000"
    assert factory.next_id() == "5001"


def test_observe_skips_past_existing_history() -> None:
    factory = MonotonicIdFactory(clock_ms=lambda: 1000)
    factory.observe(["999", "7000", "legacy-id"])

    assert factory.next_id() == "7001"
