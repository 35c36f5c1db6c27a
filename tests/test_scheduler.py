"""Tests for TaskScheduler virtual time, ordering and cancellation."""

import pytest

from marrow_grow import TaskScheduler


# --- call_later ---

def test_call_later_fires_at_due_time():
    sched = TaskScheduler()
    fired = []
    sched.call_later(3.0, lambda: fired.append(sched.now))

    sched.advance(2.9)
    assert fired == []
    sched.advance(0.1)
    assert fired == [3.0]


def test_fires_once():
    sched = TaskScheduler()
    fired = []
    handle = sched.call_later(1.0, lambda: fired.append(1))
    sched.advance(10.0)
    assert fired == [1]
    assert not handle.active


def test_time_order_and_ties():
    sched = TaskScheduler()
    order = []
    sched.call_later(2.0, lambda: order.append("b"))
    sched.call_later(1.0, lambda: order.append("a"))
    sched.call_later(2.0, lambda: order.append("c"))
    sched.advance(5.0)
    assert order == ["a", "b", "c"]


def test_now_tracks_target():
    sched = TaskScheduler()
    sched.advance(1.5)
    assert sched.now == 1.5


def test_negative_values_rejected():
    sched = TaskScheduler()
    with pytest.raises(ValueError):
        sched.advance(-1.0)
    with pytest.raises(ValueError):
        sched.call_later(-1.0, lambda: None)
    with pytest.raises(ValueError):
        sched.every(0.0, lambda: None)


# --- every ---

def test_every_repeats():
    sched = TaskScheduler()
    times = []
    sched.every(1.0, lambda: times.append(sched.now))
    sched.advance(3.0)
    assert times == [1.0, 2.0, 3.0]


def test_every_fractional_period_has_no_drift():
    sched = TaskScheduler()
    count = []
    sched.every(1.0 / 3.0, lambda: count.append(1))
    for _ in range(30):
        sched.advance(1.0)
    assert len(count) == 90


def test_cancel_from_inside_callback():
    sched = TaskScheduler()
    count = []

    def cb():
        count.append(1)
        if len(count) == 2:
            handle.cancel()

    handle = sched.every(1.0, cb)
    sched.advance(10.0)
    assert len(count) == 2


def test_callback_can_schedule_due_task():
    sched = TaskScheduler()
    order = []

    def first():
        order.append("first")
        sched.call_later(0.5, lambda: order.append("second"))

    sched.call_later(1.0, first)
    sched.advance(2.0)
    assert order == ["first", "second"]


# --- cancellation ---

def test_cancel_is_idempotent():
    sched = TaskScheduler()
    fired = []
    handle = sched.call_later(1.0, lambda: fired.append(1))
    sched.cancel(handle)
    sched.cancel(handle)
    sched.cancel(None)
    sched.advance(5.0)
    assert fired == []


def test_cancel_after_fire_is_noop():
    sched = TaskScheduler()
    handle = sched.call_later(1.0, lambda: None)
    sched.advance(1.0)
    sched.cancel(handle)


def test_cancel_all():
    sched = TaskScheduler()
    fired = []
    sched.call_later(1.0, lambda: fired.append(1))
    sched.every(1.0, lambda: fired.append(2))
    sched.cancel_all()
    sched.advance(5.0)
    assert fired == []
    assert sched.pending() == []


def test_pending_and_next_due():
    sched = TaskScheduler()
    a = sched.call_later(2.0, lambda: None, name="a")
    b = sched.call_later(1.0, lambda: None, name="b")
    assert [h.name for h in sched.pending()] == ["b", "a"]
    b.cancel()
    assert sched.next_due() == 2.0
    a.cancel()
    assert sched.next_due() is None


# --- run_realtime ---

class FakeClock:
    def __init__(self, step):
        self.t = 0.0
        self.step = step

    def __call__(self):
        value = self.t
        self.t += self.step
        return value


def test_run_realtime_drives_clock_without_sleeping_past_due():
    sched = TaskScheduler()
    fired = []
    sleeps = []
    sched.every(1.0, lambda: fired.append(sched.now))

    sched.run_realtime(
        stop=lambda: len(fired) >= 2,
        clock=FakeClock(0.25),
        sleep=sleeps.append,
    )
    assert fired == [1.0, 2.0]
    assert all(0 < s <= 0.05 for s in sleeps)
