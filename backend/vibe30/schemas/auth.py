from pydantic import BaseModel, Field

class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"

class LoginIn(BaseModel):
    email: str = Field(..., min_length=3, max_length=320)
    password: str

class SignupIn(BaseModel):
    email: str = Field(..., min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=6, max_length=128)
    display_name: str | None = Field(None, max_length=256)

class UserOut(BaseModel):
    id: int
    email: str
    display_name: str | None = None
