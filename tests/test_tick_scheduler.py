import pytest

from disclosure.events.bus import EVENT_TICK, EventBus
from disclosure.utils.timers import TickScheduler


def test_callback_runs_once_delay_elapses():
    scheduler = TickScheduler()
    fired = []

    scheduler.call_later(100, lambda: fired.append(scheduler.now_ms))
    scheduler.advance(99)
    assert fired == []
    scheduler.advance(1)

    assert fired == [100]
    assert scheduler.pending_count == 0


def test_zero_delay_never_runs_synchronously():
    scheduler = TickScheduler()
    fired = []

    scheduler.call_later(0, lambda: fired.append(True))
    assert fired == []
    scheduler.advance(0)

    assert fired == [True]


def test_cancel_prevents_callback():
    scheduler = TickScheduler()
    fired = []

    handle = scheduler.call_later(50, lambda: fired.append(True))
    assert scheduler.is_pending(handle)
    assert scheduler.cancel(handle)
    assert not scheduler.cancel(handle)
    scheduler.advance(100)

    assert fired == []


def test_callbacks_fire_in_due_order_with_clock_at_due_time():
    scheduler = TickScheduler()
    order = []

    scheduler.call_later(30, lambda: order.append(("b", scheduler.now_ms)))
    scheduler.call_later(10, lambda: order.append(("a", scheduler.now_ms)))
    scheduler.advance(50)

    assert order == [("a", 10), ("b", 30)]
    assert scheduler.now_ms == 50


def test_callbacks_scheduled_during_advance_wait_for_next_advance():
    scheduler = TickScheduler()
    fired = []

    def first():
        fired.append("first")
        scheduler.call_later(0, lambda: fired.append("second"))

    scheduler.call_later(0, first)
    scheduler.advance(10)
    assert fired == ["first"]
    scheduler.advance(0)

    assert fired == ["first", "second"]


def test_negative_delay_and_advance_rejected():
    scheduler = TickScheduler()

    with pytest.raises(ValueError):
        scheduler.call_later(-1, lambda: None)
    with pytest.raises(ValueError):
        scheduler.advance(-5)


def test_tick_events_advance_in_milliseconds():
    bus = EventBus()
    scheduler = TickScheduler(bus)
    fired = []

    scheduler.call_later(100, lambda: fired.append(True))
    bus.emit(EVENT_TICK, dt=0.05)
    assert fired == []
    bus.emit(EVENT_TICK, dt=0.05)

    assert fired == [True]
    assert scheduler.now_ms == pytest.approx(100.0)


def test_tick_with_bad_dt_falls_back_to_frame_time():
    bus = EventBus()
    scheduler = TickScheduler(bus)

    bus.emit(EVENT_TICK, dt="oops")

    assert scheduler.now_ms == pytest.approx(1000 / 60)
