import logging
from sqlalchemy.orm import Session
from repositories.friendship_repo import FriendshipRepository
from repositories.user_repo import UserRepository
from core.exceptions import FriendshipError, UserNotFoundError

logger = logging.getLogger(__name__)


class FriendshipService:
    def __init__(self, db: Session):
        self.friend_repo = FriendshipRepository(db)
        self.user_repo = UserRepository(db)

    def add_friend(self, username: str, friend_username: str):
        if username == friend_username:
            raise FriendshipError("Cannot befriend yourself")

        for name in (username, friend_username):
            if not self.user_repo.get_by_username(name):
                raise UserNotFoundError(name)

        if self.friend_repo.get(username, friend_username):
            raise FriendshipError(f"{username} and {friend_username} are already friends")

        friendship = self.friend_repo.create(username, friend_username)
        logger.info("Friendship created: %s <-> %s", friendship.user_a, friendship.user_b)
        return friendship

    def list_friends(self, username: str) -> list[str]:
        return [f.other(username) for f in self.friend_repo.list_for(username)]
