from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime


# --- INPUT Schemas (Frontend gửi lên) ---
class UserCreate(BaseModel):
    username: str
    email: EmailStr
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


# --- OUTPUT Schemas (Backend trả về) ---
class UserResponse(BaseModel):
    id: int
    username: str
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class Token(BaseModel):
    access_token: str
    token_type: str
