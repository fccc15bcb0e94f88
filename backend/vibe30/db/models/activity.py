from sqlalchemy import String, Text, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vibe30.db.base import Base

class Activity(Base):
    __tablename__ = "activities"
    __table_args__ = (UniqueConstraint("bucket_id", "position", name="uq_activity_bucket_position"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    bucket_id: Mapped[int] = mapped_column(ForeignKey("buckets.id", ondelete="CASCADE"), index=True)

    text: Mapped[str] = mapped_column(String(512))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    position: Mapped[int] = mapped_column(Integer)  # 0..n-1 within the bucket

    bucket = relationship("Bucket", back_populates="activities")
