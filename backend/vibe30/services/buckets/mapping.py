"""
Row <-> domain conversion for buckets and activities.
"""
from vibe30.db.models.activity import Activity as ActivityRow
from vibe30.db.models.bucket import Bucket as BucketRow
from vibe30.services.buckets.domain import Activity, Bucket


def activity_from_row(row: ActivityRow) -> Activity:
    return Activity(id=row.id, text=row.text, description=row.description, position=row.position)


def bucket_from_row(row: BucketRow) -> Bucket:
    activities = sorted((activity_from_row(a) for a in row.activities), key=lambda a: a.position)
    return Bucket(
        id=row.id,
        name=row.name,
        activities=activities,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def activity_rows(bucket_id: int, activities: list[Activity]) -> list[ActivityRow]:
    return [
        ActivityRow(
            bucket_id=bucket_id,
            text=a.text,
            description=a.description or None,
            position=a.position,
        )
        for a in activities
    ]
