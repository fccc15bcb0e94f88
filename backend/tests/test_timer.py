import asyncio
import threading
import time

import pytest

from vibe30.core.errors import NotFoundError, TimerStateError, ValidationError
from vibe30.services.timer import ActivityTimer, TimerRegistry, TimerState, format_remaining, run_timer


def test_format_remaining():
    assert format_remaining(0) == "0:00"
    assert format_remaining(65.9) == "1:05"
    assert format_remaining(1800) == "30:00"
    assert format_remaining(-3) == "0:00"


def test_default_duration_is_thirty_minutes(clock):
    t = ActivityTimer(clock=clock)
    snap = t.snapshot()
    assert snap.state is TimerState.idle
    assert snap.remaining_seconds == 1800
    assert snap.label == "30:00"


def test_counts_down_from_clock(clock):
    t = ActivityTimer(60, clock=clock)
    t.start()
    clock.advance(15)
    snap = t.tick()
    assert snap.state is TimerState.running
    assert snap.remaining_seconds == 45
    assert snap.progress == 25


def test_pause_excludes_paused_time(clock):
    t = ActivityTimer(60, clock=clock)
    t.start()
    clock.advance(10)
    t.pause()
    clock.advance(100)
    assert t.snapshot().remaining_seconds == 50
    t.resume()
    clock.advance(20)
    snap = t.tick()
    assert snap.elapsed_seconds == 30
    assert snap.remaining_seconds == 30


def test_completes_when_time_runs_out(clock):
    t = ActivityTimer(60, clock=clock)
    t.start()
    clock.advance(61)
    snap = t.tick()
    assert snap.state is TimerState.completed
    assert snap.remaining_seconds == 0
    assert snap.progress == 100
    assert snap.elapsed_seconds == 60


def test_extend_keeps_elapsed_progress(clock):
    t = ActivityTimer(60, clock=clock)
    t.start()
    clock.advance(50)
    snap = t.extend(300)
    assert snap.total_seconds == 360
    assert snap.elapsed_seconds == 50
    assert snap.remaining_seconds == 310
    clock.advance(20)
    assert t.tick().state is TimerState.running


def test_extend_defaults_to_five_minutes(clock):
    t = ActivityTimer(60, clock=clock)
    assert t.extend().total_seconds == 360


def test_end_from_running_or_paused(clock):
    t = ActivityTimer(60, clock=clock)
    t.start()
    clock.advance(5)
    snap = t.end()
    assert snap.state is TimerState.completed
    assert snap.elapsed_seconds == 5
    assert snap.remaining_seconds == 0

    t.reset()
    t.start()
    t.pause()
    assert t.end().state is TimerState.completed


def test_invalid_transitions(clock):
    t = ActivityTimer(60, clock=clock)
    with pytest.raises(TimerStateError):
        t.pause()
    with pytest.raises(TimerStateError):
        t.end()
    t.start()
    with pytest.raises(TimerStateError):
        t.start()
    with pytest.raises(TimerStateError):
        t.resume()
    t.end()
    with pytest.raises(TimerStateError):
        t.extend(60)


def test_reset_restores_original_duration(clock):
    t = ActivityTimer(60, clock=clock)
    t.start()
    t.extend(60)
    clock.advance(30)
    snap = t.reset()
    assert snap.state is TimerState.idle
    assert snap.total_seconds == 60
    assert snap.remaining_seconds == 60


def test_rejects_non_positive_durations(clock):
    with pytest.raises(ValidationError):
        ActivityTimer(0, clock=clock)
    with pytest.raises(ValidationError):
        ActivityTimer(60, clock=clock).extend(0)


def test_run_timer_samples_until_completed(clock):
    t = ActivityTimer(1, clock=clock)
    t.start()
    seen = []

    def on_tick(snap):
        seen.append(snap.state)
        clock.advance(0.25)

    final = asyncio.run(run_timer(t, on_tick, interval=0))
    assert final.state is TimerState.completed
    assert seen[-1] is TimerState.completed
    assert seen.count(TimerState.running) == 4


def test_registry_keeps_one_timer_per_owner(clock):
    timers = TimerRegistry(clock=clock)
    first = timers.start(1, 60)
    second = timers.start(1, 120, activity_id=7, activity_text="Read")
    assert first.timer.state is TimerState.running
    with pytest.raises(NotFoundError):
        timers.get(1, first.id)
    assert timers.get(1, second.id).activity_text == "Read"
    with pytest.raises(NotFoundError):
        timers.get(2, second.id)


class SlowClock:
    """Holds each caller inside the clock read so transitions overlap."""

    def __init__(self, now: float = 1000.0):
        self.now = now
        self.delay = 0.0

    def __call__(self) -> float:
        time.sleep(self.delay)
        return self.now


def test_concurrent_resume_has_one_winner():
    clock = SlowClock()
    t = ActivityTimer(60, clock=clock)
    t.start()
    t.pause()
    clock.delay = 0.05

    barrier = threading.Barrier(2)
    results, errors = [], []

    def resume():
        barrier.wait()
        try:
            results.append(t.resume().state)
        except TimerStateError:
            errors.append("state")
        except Exception as e:  # anything else would surface as a 500
            errors.append(repr(e))

    threads = [threading.Thread(target=resume) for _ in range(2)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    assert results == [TimerState.running]
    assert errors == ["state"]
    assert t.snapshot().remaining_seconds == 60
