"""
Bucket/activity store.

The only component that reads or writes `buckets`/`activities` rows. Every
method either returns domain values (see `domain.py`) or raises one of the
errors from `vibe30.core.errors`; SQLAlchemy exceptions never leak out.
Each write runs in one transaction on the injected session. Nothing is retried.
"""
from typing import Iterable

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from vibe30.core.errors import AuthenticationError, NotFoundError, PersistenceError, ValidationError
from vibe30.core.logging import logger
from vibe30.db.models.activity import Activity as ActivityRow
from vibe30.db.models.bucket import Bucket as BucketRow
from vibe30.services.buckets.domain import Activity, Bucket, NewActivity
from vibe30.services.buckets.mapping import activity_from_row, activity_rows, bucket_from_row
from vibe30.services.buckets.positions import move, next_position, order_for_replace

MAX_NAME_LENGTH = 256
MAX_TEXT_LENGTH = 512


def _require_owner(owner_id: int | None) -> int:
    if owner_id is None:
        raise AuthenticationError("User not authenticated")
    return owner_id


def _clean_name(name: str | None) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Bucket name is required")
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"Bucket name must be at most {MAX_NAME_LENGTH} characters")
    return name


def _clean_text(text: str | None) -> str:
    text = (text or "").strip()
    if not text:
        raise ValidationError("Activity text is required")
    if len(text) > MAX_TEXT_LENGTH:
        raise ValidationError(f"Activity text must be at most {MAX_TEXT_LENGTH} characters")
    return text


def _clean_description(description: str | None) -> str | None:
    return (description or "").strip() or None


class BucketStore:
    def __init__(self, db: Session):
        self.db = db

    def _persistence_failed(self, event: str, exc: SQLAlchemyError, **context) -> PersistenceError:
        self.db.rollback()
        logger.exception(event, error=str(exc), **context)
        return PersistenceError(cause=exc)

    def _get_bucket_row(self, bucket_id: int, owner_id: int | None = None) -> BucketRow:
        try:
            q = (
                self.db.query(BucketRow)
                .options(selectinload(BucketRow.activities))
                .filter(BucketRow.id == bucket_id)
            )
            if owner_id is not None:
                q = q.filter(BucketRow.user_id == owner_id)
            row = q.one_or_none()
        except SQLAlchemyError as e:
            raise self._persistence_failed("bucket_fetch_failed", e, bucket_id=bucket_id) from e
        if row is None:
            raise NotFoundError(f"Bucket {bucket_id} not found")
        return row

    def _insert_activities(self, bucket: BucketRow, activities: list[Activity]) -> None:
        bucket.activities.extend(activity_rows(bucket.id, activities))
        self.db.flush()

    # --- reads ---

    def list_buckets(self, owner_id: int | None) -> list[Bucket]:
        owner_id = _require_owner(owner_id)
        try:
            rows = (
                self.db.query(BucketRow)
                .options(selectinload(BucketRow.activities))
                .filter(BucketRow.user_id == owner_id)
                .order_by(BucketRow.created_at.desc(), BucketRow.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            raise self._persistence_failed("bucket_list_failed", e, owner_id=owner_id) from e
        return [bucket_from_row(r) for r in rows]

    def get_bucket(self, bucket_id: int, owner_id: int | None = None) -> Bucket:
        return bucket_from_row(self._get_bucket_row(bucket_id, owner_id))

    # --- writes ---

    def create_bucket(
        self,
        owner_id: int | None,
        name: str,
        activities: Iterable[NewActivity] = (),
    ) -> Bucket:
        owner_id = _require_owner(owner_id)
        name = _clean_name(name)
        initial = [
            Activity(text=_clean_text(a.text), description=_clean_description(a.description), position=i)
            for i, a in enumerate(activities)
        ]

        try:
            bucket = BucketRow(user_id=owner_id, name=name)
            self.db.add(bucket)
            self.db.flush()
        except SQLAlchemyError as e:
            raise self._persistence_failed("bucket_create_failed", e, owner_id=owner_id) from e

        bucket_id = bucket.id
        try:
            if initial:
                self._insert_activities(bucket, initial)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("bucket_activities_create_failed", bucket_id=bucket_id, error=str(e))
            self.compensate_failed_create(bucket_id)
            raise PersistenceError(cause=e) from e

        logger.info("bucket_created", bucket_id=bucket_id, owner_id=owner_id, activities=len(initial))
        return self.get_bucket(bucket_id)

    def compensate_failed_create(self, bucket_id: int) -> bool:
        """
        Remove a bucket whose activities could not be written. After a rollback
        there is normally nothing left; returns True only if a row was deleted.
        """
        try:
            self.db.query(ActivityRow).filter(ActivityRow.bucket_id == bucket_id).delete(synchronize_session=False)
            removed = self.db.query(BucketRow).filter(BucketRow.id == bucket_id).delete(synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("bucket_create_compensation_failed", bucket_id=bucket_id, error=str(e))
            return False
        if removed:
            logger.warning("bucket_create_compensated", bucket_id=bucket_id)
        return bool(removed)

    def update_bucket(
        self,
        bucket_id: int,
        name: str | None = None,
        activities: list[Activity] | None = None,
        owner_id: int | None = None,
    ) -> Bucket:
        """
        Partial update. `activities`, when given, is the complete new list; it is
        ordered by each element's own position and stored as 0..n-1.
        """
        if name is not None:
            name = _clean_name(name)
        replacement = None
        if activities is not None:
            replacement = order_for_replace([
                Activity(
                    text=_clean_text(a.text),
                    description=_clean_description(a.description),
                    position=a.position,
                )
                for a in activities
            ])

        row = self._get_bucket_row(bucket_id, owner_id)
        if name is None and replacement is None:
            return bucket_from_row(row)

        try:
            if name is not None:
                row.name = name
            if replacement is not None:
                # orphans are deleted on flush, before the new rows take their positions
                row.activities.clear()
                self.db.flush()
                self._insert_activities(row, replacement)
            row.updated_at = func.now()
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._persistence_failed("bucket_update_failed", e, bucket_id=bucket_id) from e

        logger.info(
            "bucket_updated",
            bucket_id=bucket_id,
            renamed=name is not None,
            activities=len(replacement) if replacement is not None else None,
        )
        return self.get_bucket(bucket_id)

    def delete_bucket(self, bucket_id: int, owner_id: int | None = None) -> None:
        row = self._get_bucket_row(bucket_id, owner_id)
        try:
            # loaded activities are deleted through the ORM cascade,
            # ON DELETE CASCADE covers anything the session never saw
            self.db.delete(row)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._persistence_failed("bucket_delete_failed", e, bucket_id=bucket_id) from e
        logger.info("bucket_deleted", bucket_id=bucket_id)

    def add_activity(
        self,
        bucket_id: int,
        text: str,
        description: str | None = None,
        owner_id: int | None = None,
    ) -> Activity:
        text = _clean_text(text)
        description = _clean_description(description)
        row = self._get_bucket_row(bucket_id, owner_id)

        try:
            positions = [
                p for (p,) in self.db.query(ActivityRow.position).filter(ActivityRow.bucket_id == bucket_id).all()
            ]
            # read-then-insert: a concurrent add can race here, the unique
            # (bucket_id, position) constraint rejects the loser
            activity = ActivityRow(
                bucket_id=bucket_id,
                text=text,
                description=description,
                position=next_position(positions),
            )
            self.db.add(activity)
            row.updated_at = func.now()
            self.db.commit()
            self.db.refresh(activity)
        except SQLAlchemyError as e:
            raise self._persistence_failed("activity_add_failed", e, bucket_id=bucket_id) from e

        logger.info("activity_added", bucket_id=bucket_id, activity_id=activity.id, position=activity.position)
        return activity_from_row(activity)

    def remove_activity(
        self,
        activity_id: int,
        bucket_id: int | None = None,
        owner_id: int | None = None,
    ) -> None:
        """Delete one activity and pack the remaining positions to 0..n-1."""
        try:
            q = self.db.query(ActivityRow).join(ActivityRow.bucket).filter(ActivityRow.id == activity_id)
            if bucket_id is not None:
                q = q.filter(ActivityRow.bucket_id == bucket_id)
            if owner_id is not None:
                q = q.filter(BucketRow.user_id == owner_id)
            activity = q.one_or_none()
        except SQLAlchemyError as e:
            raise self._persistence_failed("activity_fetch_failed", e, activity_id=activity_id) from e
        if activity is None:
            raise NotFoundError(f"Activity {activity_id} not found")

        bucket = activity.bucket
        try:
            bucket.activities.remove(activity)
            self.db.flush()
            # ascending order means each target slot is already free
            for i, remaining in enumerate(sorted(bucket.activities, key=lambda a: a.position)):
                if remaining.position != i:
                    remaining.position = i
                    self.db.flush()
            bucket.updated_at = func.now()
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._persistence_failed("activity_remove_failed", e, activity_id=activity_id) from e

        logger.info("activity_removed", bucket_id=bucket.id, activity_id=activity_id)

    def move_activity(
        self,
        bucket_id: int,
        activity_id: int,
        target_id: int,
        owner_id: int | None = None,
    ) -> Bucket:
        bucket = self.get_bucket(bucket_id, owner_id)
        reordered = move(bucket.activities, activity_id, target_id)
        if activity_id == target_id:
            return bucket
        return self.update_bucket(bucket_id, activities=reordered, owner_id=owner_id)
