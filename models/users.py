from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from models.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships (tin nhắn tham chiếu user qua username)
    sent_messages = relationship("Message", foreign_keys="[Message.sender]", back_populates="sender_user")
    received_messages = relationship("Message", foreign_keys="[Message.recipient]", back_populates="recipient_user")

    def __repr__(self):
        return f"<User {self.id} {self.username}>"
