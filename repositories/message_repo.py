from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import or_, desc, func
from models.messages import Message


class MessageRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, sender: str, recipient: str, subject: str, body: str) -> int:
        new_msg = Message(
            sender=sender,
            recipient=recipient,
            subject=subject,
            body=body,
            read_status=False,
            deleted_for_sender=False,
            deleted_for_recipient=False,
        )
        self.db.add(new_msg)
        self.db.flush()  # DB gán message_id trong transaction hiện tại
        message_id = new_msg.message_id
        # Không refresh sau commit
        self.db.commit()
        return message_id

    def get_by_id(self, message_id: int) -> Optional[Message]:
        return self.db.query(Message).filter(Message.message_id == message_id).first()

    def get_sent(self, sender: str) -> list[Message]:
        """Tin đã gửi mà người gửi chưa xóa"""
        return self.db.query(Message).filter(
            Message.sender == sender,
            Message.deleted_for_sender == False  # noqa: E712
        ).order_by(Message.message_id).all()

    def get_received(self, recipient: str) -> list[Message]:
        """Tin đã nhận mà người nhận chưa xóa"""
        return self.db.query(Message).filter(
            Message.recipient == recipient,
            Message.deleted_for_recipient == False  # noqa: E712
        ).order_by(Message.message_id).all()

    def search_received(self, recipient: str, term: str) -> list[Message]:
        """Tìm trong subject/body (so khớp chuỗi con, ký tự % và _ được escape)"""
        return self.db.query(Message).filter(
            Message.recipient == recipient,
            or_(
                Message.subject.contains(term, autoescape=True),
                Message.body.contains(term, autoescape=True),
            )
        ).order_by(desc(Message.date_sent), desc(Message.message_id)).all()

    def count_unread(self, recipient: str) -> int:
        return self.db.query(func.count(Message.message_id)).filter(
            Message.recipient == recipient,
            Message.read_status == False,  # noqa: E712
            Message.deleted_for_recipient == False  # noqa: E712
        ).scalar() or 0

    def mark_as_read(self, message_id: int, recipient: str) -> int:
        return self._set_flag(
            {"read_status": True},
            Message.message_id == message_id,
            Message.recipient == recipient,
        )

    def mark_deleted_for_sender(self, message_id: int, sender: str) -> int:
        return self._set_flag(
            {"deleted_for_sender": True},
            Message.message_id == message_id,
            Message.sender == sender,
        )

    def mark_deleted_for_recipient(self, message_id: int, recipient: str) -> int:
        return self._set_flag(
            {"deleted_for_recipient": True},
            Message.message_id == message_id,
            Message.recipient == recipient,
        )

    def _set_flag(self, values: dict, *criteria) -> int:
        """UPDATE ... WHERE id AND username; trả về số dòng khớp"""
        rows = self.db.query(Message).filter(*criteria).update(values, synchronize_session=False)
        self.db.commit()
        return rows
