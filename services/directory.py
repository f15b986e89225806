"""
Collaborators consumed by the messaging service.

The service only depends on the two protocols below; the Sql* classes are
the default implementations backed by the users/friendships tables.
"""
from typing import Optional, Protocol

from core.database import SessionFactory, session_scope
from models.friendships import Friendship
from repositories.friendship_repo import FriendshipRepository
from repositories.user_repo import UserRepository


class UserDirectory(Protocol):
    def exists(self, username: str) -> bool: ...


class FriendshipRegistry(Protocol):
    def status(self, first: str, second: str) -> Optional[Friendship]: ...


class SqlUserDirectory:
    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def exists(self, username: str) -> bool:
        with session_scope(self.session_factory) as db:
            return UserRepository(db).get_by_username(username) is not None


class SqlFriendshipRegistry:
    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def status(self, first: str, second: str) -> Optional[Friendship]:
        with session_scope(self.session_factory) as db:
            friendship = FriendshipRepository(db).get(first, second)
            if friendship is not None:
                db.expunge(friendship)
            return friendship
