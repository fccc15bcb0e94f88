from fastapi import APIRouter, Depends, HTTPException

from vibe30.core.deps import get_current_user, get_store, get_timers
from vibe30.db.models.user import User
from vibe30.schemas.timers import TimerExtendIn, TimerOut, TimerStartIn
from vibe30.services.buckets import BucketStore
from vibe30.services.timer import TimerEntry, TimerRegistry

router = APIRouter()


def _timer_out(entry: TimerEntry) -> TimerOut:
    snap = entry.timer.tick()
    return TimerOut(
        id=entry.id,
        state=snap.state.value,
        activity_id=entry.activity_id,
        activity_text=entry.activity_text,
        total_seconds=snap.total_seconds,
        elapsed_seconds=snap.elapsed_seconds,
        remaining_seconds=snap.remaining_seconds,
        progress=snap.progress,
        label=snap.label,
    )


@router.post("", response_model=TimerOut, status_code=201)
def start_timer(
    data: TimerStartIn,
    timers: TimerRegistry = Depends(get_timers),
    store: BucketStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    activity_text = None
    if data.activity_id is not None:
        if data.bucket_id is None:
            raise HTTPException(status_code=422, detail="bucket_id is required with activity_id")
        bucket = store.get_bucket(data.bucket_id, owner_id=user.id)
        match = [a for a in bucket.activities if a.id == data.activity_id]
        if not match:
            raise HTTPException(status_code=404, detail="Activity not found")
        activity_text = match[0].text

    duration = data.duration_minutes * 60 if data.duration_minutes is not None else None
    entry = timers.start(user.id, duration, activity_id=data.activity_id, activity_text=activity_text)
    return _timer_out(entry)


@router.get("/{timer_id}", response_model=TimerOut)
def get_timer(timer_id: str, timers: TimerRegistry = Depends(get_timers), user: User = Depends(get_current_user)):
    return _timer_out(timers.get(user.id, timer_id))


@router.post("/{timer_id}/pause", response_model=TimerOut)
def pause_timer(timer_id: str, timers: TimerRegistry = Depends(get_timers), user: User = Depends(get_current_user)):
    entry = timers.get(user.id, timer_id)
    entry.timer.pause()
    return _timer_out(entry)


@router.post("/{timer_id}/resume", response_model=TimerOut)
def resume_timer(timer_id: str, timers: TimerRegistry = Depends(get_timers), user: User = Depends(get_current_user)):
    entry = timers.get(user.id, timer_id)
    entry.timer.resume()
    return _timer_out(entry)


@router.post("/{timer_id}/extend", response_model=TimerOut)
def extend_timer(
    timer_id: str,
    data: TimerExtendIn | None = None,
    timers: TimerRegistry = Depends(get_timers),
    user: User = Depends(get_current_user),
):
    entry = timers.get(user.id, timer_id)
    minutes = data.minutes if data is not None else None
    entry.timer.extend(minutes * 60 if minutes is not None else None)
    return _timer_out(entry)


@router.post("/{timer_id}/end", response_model=TimerOut)
def end_timer(timer_id: str, timers: TimerRegistry = Depends(get_timers), user: User = Depends(get_current_user)):
    entry = timers.get(user.id, timer_id)
    entry.timer.end()
    return _timer_out(entry)


@router.post("/{timer_id}/reset", response_model=TimerOut)
def reset_timer(timer_id: str, timers: TimerRegistry = Depends(get_timers), user: User = Depends(get_current_user)):
    entry = timers.get(user.id, timer_id)
    entry.timer.reset()
    return _timer_out(entry)
