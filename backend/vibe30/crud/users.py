from sqlalchemy.orm import Session
from vibe30.db.models.user import User
from vibe30.core.security import hash_password
from vibe30.schemas.auth import SignupIn

def normalize_email(email: str) -> str:
    return email.strip().lower()

def get_user(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).one_or_none()

def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == normalize_email(email)).one_or_none()

def create_user(db: Session, data: SignupIn) -> User:
    u = User(
        email=normalize_email(data.email),
        password_hash=hash_password(data.password),
        display_name=(data.display_name or "").strip() or None,
    )
    db.add(u)
    db.commit()
    db.refresh(u)
    return u
