from typing import Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from models.friendships import Friendship


class FriendshipRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, first: str, second: str) -> Optional[Friendship]:
        user_a, user_b = Friendship.normalize(first, second)
        return self.db.query(Friendship).filter(
            Friendship.user_a == user_a,
            Friendship.user_b == user_b
        ).first()

    def create(self, first: str, second: str) -> Friendship:
        user_a, user_b = Friendship.normalize(first, second)
        friendship = Friendship(user_a=user_a, user_b=user_b)
        try:
            self.db.add(friendship)
            self.db.commit()
            self.db.refresh(friendship)
            return friendship
        except Exception:
            self.db.rollback()
            raise

    def list_for(self, username: str) -> list[Friendship]:
        return self.db.query(Friendship).filter(
            or_(Friendship.user_a == username, Friendship.user_b == username)
        ).order_by(Friendship.created_at, Friendship.id).all()
