import datetime as dt
from pydantic import BaseModel, Field


class ActivityIn(BaseModel):
    text: str
    description: str | None = None


class ActivityPositionIn(ActivityIn):
    position: int = Field(..., ge=0)


class ActivityOut(BaseModel):
    id: int
    text: str
    description: str | None = None
    position: int


class BucketCreate(BaseModel):
    name: str
    activities: list[ActivityIn] = []


class BucketUpdate(BaseModel):
    name: str | None = None
    activities: list[ActivityPositionIn] | None = None


class BucketOut(BaseModel):
    id: int
    name: str
    activities: list[ActivityOut]
    created_at: dt.datetime
    updated_at: dt.datetime


class ActivityMoveIn(BaseModel):
    activity_id: int
    target_id: int


class DrawOut(BaseModel):
    bucket_id: int
    bucket_name: str
    activity: ActivityOut


class TemplateOut(BaseModel):
    id: str
    name: str
    tagline: str
    activities: list[ActivityIn]
