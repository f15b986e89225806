from typing import Literal
from fastapi import APIRouter, Depends, HTTPException, Query, status

from core.database import SessionFactory, get_session_factory
from core.security import get_current_user
from models.users import User
from schemas.message_schema import (
    MessageCreate, MessageListResponse, MessageOut, SendMessageResponse,
    UnreadCountResponse, sort_newest_first,
)
from services.directory import SqlFriendshipRegistry, SqlUserDirectory
from services.message_service import MessagingService, SendError

router = APIRouter()

SEND_ERRORS = {
    SendError.USERS_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Sender or recipient not found"),
    SendError.NO_FRIENDSHIP: (status.HTTP_403_FORBIDDEN, "You can only message your friends"),
    SendError.SEND_FAILED: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Message could not be sent"),
}


def get_messaging_service(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> MessagingService:
    return MessagingService(
        session_factory,
        SqlUserDirectory(session_factory),
        SqlFriendshipRegistry(session_factory),
    )


def _not_found():
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")


@router.get("/inbox", response_model=MessageListResponse)
def get_inbox(
    service: MessagingService = Depends(get_messaging_service),
    current_user: User = Depends(get_current_user),
):
    """Hộp thư đến, mới nhất trước"""
    return {"messages": sort_newest_first(service.list_received(current_user.username))}


@router.get("/sent", response_model=MessageListResponse)
def get_sent(
    service: MessagingService = Depends(get_messaging_service),
    current_user: User = Depends(get_current_user),
):
    """Tin đã gửi, mới nhất trước"""
    return {"messages": sort_newest_first(service.list_sent(current_user.username))}


@router.get("/unread-count", response_model=UnreadCountResponse)
def unread_count(
    service: MessagingService = Depends(get_messaging_service),
    current_user: User = Depends(get_current_user),
):
    return {"count": service.unread_count(current_user.username)}


@router.get("/search", response_model=MessageListResponse)
def search_messages(
    q: str = Query(..., min_length=1),
    service: MessagingService = Depends(get_messaging_service),
    current_user: User = Depends(get_current_user),
):
    return {"messages": service.search(current_user.username, q)}


@router.get("/{message_id}", response_model=MessageOut)
def get_message(
    message_id: int,
    service: MessagingService = Depends(get_messaging_service),
    current_user: User = Depends(get_current_user),
):
    msg = service.get_by_id(message_id)
    # Không phân biệt "không tồn tại" và "không phải của bạn"
    if msg is None or current_user.username not in (msg.sender, msg.recipient):
        raise _not_found()
    return msg


@router.post("", response_model=SendMessageResponse, status_code=status.HTTP_201_CREATED)
def send_message(
    msg_in: MessageCreate,
    service: MessagingService = Depends(get_messaging_service),
    current_user: User = Depends(get_current_user),
):
    """Gửi tin nhắn mới"""
    result = service.send(current_user.username, msg_in.recipient, msg_in.subject, msg_in.body)
    if isinstance(result, SendError):
        code, detail = SEND_ERRORS[result]
        raise HTTPException(status_code=code, detail=detail)
    return {"status": "success", "msg_id": result}


@router.put("/{message_id}/read")
def mark_read(
    message_id: int,
    service: MessagingService = Depends(get_messaging_service),
    current_user: User = Depends(get_current_user),
):
    """Đánh dấu đã đọc"""
    if not service.mark_as_read(message_id, current_user.username):
        raise _not_found()
    return {"status": "marked as read"}


@router.delete("/{message_id}")
def delete_message(
    message_id: int,
    box: Literal["inbox", "sent"] = "inbox",
    service: MessagingService = Depends(get_messaging_service),
    current_user: User = Depends(get_current_user),
):
    """Xóa mềm: chỉ ẩn tin nhắn khỏi hộp thư của mình"""
    if box == "sent":
        deleted = service.delete_for_sender(message_id, current_user.username)
    else:
        deleted = service.delete_for_recipient(message_id, current_user.username)
    if not deleted:
        raise _not_found()
    return {"status": "deleted"}
