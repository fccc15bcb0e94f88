import datetime as dt
from pydantic import BaseModel


class ItemIn(BaseModel):
    name: str | None = None


class ItemOut(BaseModel):
    id: int
    name: str
    created_at: dt.datetime | None = None
