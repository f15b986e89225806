from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint, CheckConstraint
from datetime import datetime
from .base import Base


class Friendship(Base):
    """
    A mutual friendship stored once per pair.
    Usernames are normalized so that user_a < user_b.
    """
    __tablename__ = "friendships"
    __table_args__ = (
        UniqueConstraint("user_a", "user_b", name="uq_friendship_pair"),
        CheckConstraint("user_a <> user_b", name="ck_friendship_no_self"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_a = Column(String(50), ForeignKey("users.username"), nullable=False, index=True)
    user_b = Column(String(50), ForeignKey("users.username"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    @staticmethod
    def normalize(first: str, second: str) -> tuple[str, str]:
        return (first, second) if first < second else (second, first)

    def other(self, username: str) -> str:
        return self.user_b if self.user_a == username else self.user_a

    def __repr__(self):
        return f"<Friendship {self.user_a} <-> {self.user_b}>"
