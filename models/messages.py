from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Text, func
from sqlalchemy.orm import relationship
from .base import Base


class Message(Base):
    __tablename__ = "messages"

    message_id = Column(Integer, primary_key=True, autoincrement=True)
    sender = Column(String(50), ForeignKey("users.username"), nullable=False, index=True)
    recipient = Column(String(50), ForeignKey("users.username"), nullable=False, index=True)
    subject = Column(Text, nullable=False, default="")
    body = Column(Text, nullable=False, default="")
    read_status = Column(Boolean, nullable=False, default=False)  # Đã đọc hay chưa

    # Soft delete: mỗi bên có cờ riêng, không bao giờ xóa dòng thật
    deleted_for_sender = Column(Boolean, nullable=False, default=False)
    deleted_for_recipient = Column(Boolean, nullable=False, default=False)

    # Thời gian gửi do DB gán lúc INSERT
    date_sent = Column(DateTime, nullable=False, server_default=func.now(), index=True)

    sender_user = relationship("User", foreign_keys=[sender], back_populates="sent_messages")
    recipient_user = relationship("User", foreign_keys=[recipient], back_populates="received_messages")

    def __repr__(self):
        return f"<Message {self.message_id} from {self.sender} to {self.recipient}>"
