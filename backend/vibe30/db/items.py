"""
Embedded SQLite store behind the demo `/api/items` endpoint.

Unrelated to buckets: its own declarative base, engine and file.
"""
import datetime as dt
from sqlalchemy import String, DateTime, create_engine, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker

from vibe30.core.config import settings
from vibe30.db.session import engine_kwargs


class ItemsBase(DeclarativeBase):
    pass


class Item(ItemsBase):
    __tablename__ = "items"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime, server_default=func.current_timestamp())


items_engine = create_engine(settings.ITEMS_DATABASE_URL, **engine_kwargs(settings.ITEMS_DATABASE_URL))
ItemsSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=items_engine)


def init_items_db(bind=None) -> None:
    ItemsBase.metadata.create_all(bind=bind or items_engine)


def get_items_db():
    db = ItemsSessionLocal()
    try:
        yield db
    finally:
        db.close()
