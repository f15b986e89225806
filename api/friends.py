from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.security import get_current_user
from models.users import User
from schemas.friendship_schema import FriendListResponse, FriendshipResponse
from services.friendship_service import FriendshipService

router = APIRouter()


@router.get("", response_model=FriendListResponse)
def list_friends(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Danh sách bạn bè của user hiện tại"""
    service = FriendshipService(db)
    return {"friends": service.list_friends(current_user.username)}


@router.post("/{username}", response_model=FriendshipResponse, status_code=status.HTTP_201_CREATED)
def add_friend(
    username: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Kết bạn với một user khác"""
    service = FriendshipService(db)
    return service.add_friend(current_user.username, username)
