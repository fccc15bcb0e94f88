import datetime as dt
from dataclasses import dataclass, field


@dataclass
class Activity:
    text: str
    position: int = 0
    description: str | None = None
    id: int | None = None


@dataclass
class Bucket:
    id: int
    name: str
    created_at: dt.datetime
    updated_at: dt.datetime
    activities: list[Activity] = field(default_factory=list)


@dataclass
class NewActivity:
    """Activity input without a position; order comes from the list it sits in."""
    text: str
    description: str | None = None
