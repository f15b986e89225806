from pydantic import BaseModel, computed_field
from typing import Iterable, List
from datetime import datetime

DISPLAY_FORMAT = "%Y-%m-%d %H:%M"


# --- Input Models (dữ liệu Frontend gửi lên) ---
class MessageCreate(BaseModel):
    recipient: str
    subject: str = ""
    body: str = ""


# --- Output Models (dữ liệu trả về) ---
class MessageOut(BaseModel):
    """Bản chụp (snapshot) của một dòng messages, tách khỏi session."""
    message_id: int
    sender: str
    recipient: str
    subject: str
    body: str
    read_status: bool
    deleted_for_sender: bool
    deleted_for_recipient: bool
    date_sent: datetime

    class Config:
        from_attributes = True

    @computed_field
    @property
    def date_sent_display(self) -> str:
        return self.date_sent.strftime(DISPLAY_FORMAT)


class MessageListResponse(BaseModel):
    messages: List[MessageOut]


class SendMessageResponse(BaseModel):
    status: str
    msg_id: int


class UnreadCountResponse(BaseModel):
    count: int


def sort_newest_first(messages: Iterable[MessageOut]) -> List[MessageOut]:
    """Sắp xếp tin nhắn mới nhất lên đầu (theo date_sent, rồi message_id)."""
    return sorted(messages, key=lambda m: (m.date_sent, m.message_id), reverse=True)
