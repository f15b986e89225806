from pydantic import BaseModel
from typing import List
from datetime import datetime


class FriendshipResponse(BaseModel):
    id: int
    user_a: str
    user_b: str
    created_at: datetime

    class Config:
        from_attributes = True


class FriendListResponse(BaseModel):
    friends: List[str]
