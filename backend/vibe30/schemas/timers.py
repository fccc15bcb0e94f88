from pydantic import BaseModel, Field


class TimerStartIn(BaseModel):
    duration_minutes: float | None = Field(None, gt=0, le=24 * 60)
    bucket_id: int | None = None
    activity_id: int | None = None


class TimerExtendIn(BaseModel):
    minutes: float | None = Field(None, gt=0, le=24 * 60)


class TimerOut(BaseModel):
    id: str
    state: str
    activity_id: int | None = None
    activity_text: str | None = None
    total_seconds: float
    elapsed_seconds: float
    remaining_seconds: float
    progress: float
    label: str
