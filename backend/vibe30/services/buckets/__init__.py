from vibe30.services.buckets.domain import Activity, Bucket, NewActivity
from vibe30.services.buckets.positions import select_random
from vibe30.services.buckets.store import BucketStore

__all__ = ["Activity", "Bucket", "NewActivity", "BucketStore", "select_random"]
