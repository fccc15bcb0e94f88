from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vibe30.db.base import Base
from vibe30.db.models._mixins import TimestampMixin

class Bucket(Base, TimestampMixin):
    __tablename__ = "buckets"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(256))

    owner = relationship("User", back_populates="buckets")
    activities = relationship(
        "Activity",
        back_populates="bucket",
        order_by="Activity.position",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
