from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy.orm import Session

from vibe30.db.session import SessionLocal
from vibe30.core.errors import AuthenticationError
from vibe30.core.security import decode_token
from vibe30.db.models.user import User
from vibe30.crud.users import get_user
from vibe30.services.buckets import BucketStore
from vibe30.services.timer import TimerRegistry

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_current_user(db: Session = Depends(get_db), token: str | None = Depends(oauth2_scheme)) -> User:
    if not token:
        raise AuthenticationError("Not authenticated")
    try:
        payload = decode_token(token)
        user_id = int(payload.get("sub"))
    except (JWTError, TypeError, ValueError):
        raise AuthenticationError("Invalid token")
    user = get_user(db, user_id)
    if not user or not user.is_active:
        raise AuthenticationError("User not found/disabled")
    return user

def get_store(db: Session = Depends(get_db)) -> BucketStore:
    return BucketStore(db)

def get_timers(request: Request) -> TimerRegistry:
    return request.app.state.timers
