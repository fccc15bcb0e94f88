# import all models for Alembic
from vibe30.db.models.user import User
from vibe30.db.models.bucket import Bucket
from vibe30.db.models.activity import Activity
