import enum
import logging
from typing import Optional, Union

from sqlalchemy.exc import SQLAlchemyError

from core.database import SessionFactory, session_scope
from repositories.message_repo import MessageRepository
from schemas.message_schema import MessageOut
from services.directory import UserDirectory, FriendshipRegistry

logger = logging.getLogger(__name__)


class SendError(enum.IntEnum):
    """Giá trị trả về khi gửi thất bại (luôn <= 0, không trùng với ID hợp lệ)."""
    SEND_FAILED = 0
    NO_FRIENDSHIP = -1
    USERS_NOT_FOUND = -2


class MessagingService:
    """
    Send/read/delete/search over messages.

    Each operation opens its own short-lived session and closes it before
    returning. Storage faults never escape: reads fall back to an empty
    result, writes report failure.
    """

    def __init__(self, session_factory: SessionFactory,
                 user_directory: UserDirectory,
                 friendship_registry: FriendshipRegistry):
        self.session_factory = session_factory
        self.users = user_directory
        self.friendships = friendship_registry

    def send(self, sender: str, recipient: str, subject: str, body: str) -> Union[int, SendError]:
        try:
            # 1. Cả người gửi và người nhận phải tồn tại
            if not (self.users.exists(sender) and self.users.exists(recipient)):
                logger.warning("Send rejected: unknown user (%s -> %s)", sender, recipient)
                return SendError.USERS_NOT_FOUND

            # 2. Hai người phải là bạn bè
            if self.friendships.status(sender, recipient) is None:
                logger.warning("Send rejected: %s and %s are not friends", sender, recipient)
                return SendError.NO_FRIENDSHIP
        except SQLAlchemyError:
            logger.exception("Storage error while validating message %s -> %s", sender, recipient)
            return SendError.SEND_FAILED

        with session_scope(self.session_factory) as db:
            try:
                message_id = MessageRepository(db).create(sender, recipient, subject or "", body or "")
            except SQLAlchemyError:
                db.rollback()
                logger.exception("Storage error while adding a message %s -> %s", sender, recipient)
                return SendError.SEND_FAILED

            logger.info("Message %s sent from %s to %s", message_id, sender, recipient)
            return message_id

    def list_sent(self, sender: str) -> list[MessageOut]:
        with session_scope(self.session_factory) as db:
            try:
                rows = MessageRepository(db).get_sent(sender)
                return [MessageOut.model_validate(row) for row in rows]
            except SQLAlchemyError:
                logger.exception("Storage error in list_sent(%s)", sender)
                return []

    def list_received(self, recipient: str) -> list[MessageOut]:
        with session_scope(self.session_factory) as db:
            try:
                rows = MessageRepository(db).get_received(recipient)
                return [MessageOut.model_validate(row) for row in rows]
            except SQLAlchemyError:
                logger.exception("Storage error in list_received(%s)", recipient)
                return []

    def search(self, username: str, term: str) -> list[MessageOut]:
        """Tin nhắn username đã nhận có chứa term trong subject hoặc body, mới nhất trước."""
        try:
            if not self.users.exists(username):
                return []
        except SQLAlchemyError:
            logger.exception("Storage error while checking user %s", username)
            return []

        with session_scope(self.session_factory) as db:
            try:
                rows = MessageRepository(db).search_received(username, term)
                return [MessageOut.model_validate(row) for row in rows]
            except SQLAlchemyError:
                logger.exception("Storage error in search(%s, %r)", username, term)
                return []

    def get_by_id(self, message_id: int) -> Optional[MessageOut]:
        # Không lọc theo quyền sở hữu hay cờ xóa
        with session_scope(self.session_factory) as db:
            try:
                row = MessageRepository(db).get_by_id(message_id)
                return MessageOut.model_validate(row) if row is not None else None
            except SQLAlchemyError:
                logger.exception("Storage error in get_by_id(%s)", message_id)
                return None

    def unread_count(self, recipient: str) -> int:
        with session_scope(self.session_factory) as db:
            try:
                return MessageRepository(db).count_unread(recipient)
            except SQLAlchemyError:
                logger.exception("Storage error in unread_count(%s)", recipient)
                return 0

    def mark_as_read(self, message_id: int, recipient: str) -> bool:
        return self._update(MessageRepository.mark_as_read, message_id, recipient)

    def delete_for_sender(self, message_id: int, sender: str) -> bool:
        return self._update(MessageRepository.mark_deleted_for_sender, message_id, sender)

    def delete_for_recipient(self, message_id: int, recipient: str) -> bool:
        return self._update(MessageRepository.mark_deleted_for_recipient, message_id, recipient)

    def _update(self, operation, message_id: int, username: str) -> bool:
        with session_scope(self.session_factory) as db:
            try:
                rows = operation(MessageRepository(db), message_id, username)
            except SQLAlchemyError:
                db.rollback()
                logger.exception("Storage error in %s(%s, %s)", operation.__name__, message_id, username)
                return False
            return rows == 1
