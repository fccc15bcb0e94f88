"""
Countdown timer for a drawn activity.

Remaining time is always derived from the clock: elapsed is `now - started_at`
minus the time spent paused. Nothing is decremented per tick, so a late or
skipped sample never makes the timer drift.

    idle -> running <-> paused
    running | paused -> completed   (natural expiry or end())
"""
import asyncio
import threading
import time
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from vibe30.core.config import settings
from vibe30.core.errors import NotFoundError, TimerStateError, ValidationError

Clock = Callable[[], float]


class TimerState(str, Enum):
    idle = "idle"
    running = "running"
    paused = "paused"
    completed = "completed"


@dataclass
class TimerSnapshot:
    state: TimerState
    total_seconds: float
    elapsed_seconds: float
    remaining_seconds: float
    progress: float  # percent, 0..100
    label: str


def format_remaining(seconds: float) -> str:
    seconds = max(int(seconds), 0)
    return f"{seconds // 60}:{seconds % 60:02d}"


def default_duration_seconds() -> float:
    return settings.TIMER_DURATION_MINUTES * 60


def default_extend_seconds() -> float:
    return settings.TIMER_EXTEND_MINUTES * 60


class ActivityTimer:
    """
    Transitions are serialized on the timer's own lock: concurrent requests
    for the same timer see one winner and a TimerStateError for the rest.
    """

    def __init__(self, duration_seconds: float | None = None, clock: Clock = time.monotonic):
        duration_seconds = default_duration_seconds() if duration_seconds is None else duration_seconds
        if duration_seconds <= 0:
            raise ValidationError("Timer duration must be positive")
        self.duration_seconds = float(duration_seconds)
        self._clock = clock
        self._lock = threading.RLock()
        self.reset()

    def reset(self) -> TimerSnapshot:
        with self._lock:
            self.state = TimerState.idle
            self.total_seconds = self.duration_seconds
            self._started_at: float | None = None
            self._paused_at: float | None = None
            self._paused_total = 0.0
            self._completed_elapsed = 0.0
            return self.snapshot()

    def _require(self, action: str, *states: TimerState) -> None:
        if self.state not in states:
            raise TimerStateError(f"Cannot {action} a timer that is {self.state.value}")

    def _elapsed(self, now: float) -> float:
        if self.state is TimerState.completed:
            return self._completed_elapsed
        if self._started_at is None:
            return 0.0
        paused = self._paused_total
        if self._paused_at is not None:
            paused += now - self._paused_at
        return max(now - self._started_at - paused, 0.0)

    def _complete(self, now: float) -> None:
        self._completed_elapsed = min(self._elapsed(now), self.total_seconds)
        self._paused_at = None
        self.state = TimerState.completed

    def start(self) -> TimerSnapshot:
        with self._lock:
            self._require("start", TimerState.idle)
            self._started_at = self._clock()
            self.state = TimerState.running
            return self.snapshot()

    def pause(self) -> TimerSnapshot:
        with self._lock:
            self._require("pause", TimerState.running)
            now = self._clock()
            if self._elapsed(now) >= self.total_seconds:
                self._complete(now)
            else:
                self._paused_at = now
                self.state = TimerState.paused
            return self.snapshot(now)

    def resume(self) -> TimerSnapshot:
        with self._lock:
            self._require("resume", TimerState.paused)
            now = self._clock()
            self._paused_total += now - self._paused_at
            self._paused_at = None
            self.state = TimerState.running
            return self.snapshot(now)

    def extend(self, seconds: float | None = None) -> TimerSnapshot:
        """Push the finish line back; elapsed progress is kept."""
        seconds = default_extend_seconds() if seconds is None else seconds
        if seconds <= 0:
            raise ValidationError("Extension must be positive")
        with self._lock:
            self._require("extend", TimerState.idle, TimerState.running, TimerState.paused)
            self.total_seconds += seconds
            return self.snapshot()

    def end(self) -> TimerSnapshot:
        with self._lock:
            self._require("end", TimerState.running, TimerState.paused)
            now = self._clock()
            self._complete(now)
            return self.snapshot(now)

    def tick(self) -> TimerSnapshot:
        with self._lock:
            now = self._clock()
            if self.state is TimerState.running and self._elapsed(now) >= self.total_seconds:
                self._complete(now)
            return self.snapshot(now)

    def snapshot(self, now: float | None = None) -> TimerSnapshot:
        with self._lock:
            now = self._clock() if now is None else now
            if self.state is TimerState.completed:
                elapsed, remaining, progress = self._completed_elapsed, 0.0, 100.0
            else:
                elapsed = self._elapsed(now)
                remaining = max(self.total_seconds - elapsed, 0.0)
                progress = min(elapsed / self.total_seconds * 100, 100.0)
            return TimerSnapshot(
                state=self.state,
                total_seconds=self.total_seconds,
                elapsed_seconds=elapsed,
                remaining_seconds=remaining,
                progress=progress,
                label=format_remaining(remaining),
            )


async def run_timer(
    timer: ActivityTimer,
    on_tick: Callable[[TimerSnapshot], None] | None = None,
    interval: float | None = None,
) -> TimerSnapshot:
    """
    Sample a running timer every `interval` seconds until it stops running.

    For in-process consumers that want a live feed. The HTTP API does not use
    it: `/timers` samples with `tick()` on each request, which is enough since
    remaining time comes from the clock.
    """
    interval = settings.TIMER_INTERVAL_MS / 1000 if interval is None else interval
    while True:
        snap = timer.tick()
        if on_tick is not None:
            on_tick(snap)
        if snap.state is not TimerState.running:
            return snap
        await asyncio.sleep(interval)


@dataclass
class TimerEntry:
    id: str
    owner_id: int
    timer: ActivityTimer
    activity_id: int | None = None
    activity_text: str | None = None


class TimerRegistry:
    """
    In-process timers, one per user: starting a new one replaces the previous.
    Lost on restart.
    """

    def __init__(self, clock: Clock = time.monotonic):
        self._clock = clock
        self._entries: dict[str, TimerEntry] = {}
        self._lock = threading.Lock()

    def start(
        self,
        owner_id: int,
        duration_seconds: float | None = None,
        activity_id: int | None = None,
        activity_text: str | None = None,
    ) -> TimerEntry:
        timer = ActivityTimer(duration_seconds, clock=self._clock)
        entry = TimerEntry(
            id=uuid.uuid4().hex,
            owner_id=owner_id,
            timer=timer,
            activity_id=activity_id,
            activity_text=activity_text,
        )
        with self._lock:
            for timer_id in [k for k, e in self._entries.items() if e.owner_id == owner_id]:
                del self._entries[timer_id]
            self._entries[entry.id] = entry
        timer.start()
        return entry

    def get(self, owner_id: int, timer_id: str) -> TimerEntry:
        with self._lock:
            entry = self._entries.get(timer_id)
        if entry is None or entry.owner_id != owner_id:
            raise NotFoundError(f"Timer {timer_id} not found")
        return entry
