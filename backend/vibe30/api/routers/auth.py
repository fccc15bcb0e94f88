from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from vibe30.core.deps import get_db, get_current_user
from vibe30.core.logging import logger
from vibe30.schemas.auth import LoginIn, SignupIn, TokenOut, UserOut
from vibe30.crud.users import get_user_by_email, create_user
from vibe30.core.security import verify_password, create_access_token

router = APIRouter()

@router.post("/signup", response_model=TokenOut, status_code=201)
def signup(data: SignupIn, db: Session = Depends(get_db)):
    if get_user_by_email(db, data.email):
        raise HTTPException(status_code=409, detail="Email already registered")
    user = create_user(db, data)
    logger.info("user_signed_up", user_id=user.id)
    return TokenOut(access_token=create_access_token(sub=str(user.id)))

@router.post("/login", response_model=TokenOut)
def login(data: LoginIn, db: Session = Depends(get_db)):
    user = get_user_by_email(db, data.email)
    if not user or not user.is_active:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    if not verify_password(data.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return TokenOut(access_token=create_access_token(sub=str(user.id)))

@router.get("/me", response_model=UserOut)
def me(user = Depends(get_current_user)):
    return UserOut(id=user.id, email=user.email, display_name=user.display_name)
