from sqlalchemy.orm import Session
from vibe30.db.session import SessionLocal
from vibe30.core.config import settings
from vibe30.core.logging import logger
from vibe30.crud.users import get_user_by_email, create_user
from vibe30.data.templates import BUCKET_TEMPLATES
from vibe30.schemas.auth import SignupIn
from vibe30.services.buckets import BucketStore, NewActivity

def seed_demo():
    db: Session = SessionLocal()
    try:
        if not (settings.DEMO_EMAIL and settings.DEMO_PASSWORD):
            return
        if get_user_by_email(db, settings.DEMO_EMAIL):
            return
        user = create_user(db, SignupIn(
            email=settings.DEMO_EMAIL,
            password=settings.DEMO_PASSWORD,
            display_name="Demo User",
        ))
        template = BUCKET_TEMPLATES[0]
        BucketStore(db).create_bucket(
            user.id,
            template["name"],
            [NewActivity(text=a["text"], description=a["description"]) for a in template["activities"]],
        )
        logger.info("demo_seeded", user_id=user.id)
    finally:
        db.close()
