import logging
from sqlalchemy.orm import Session
from repositories.user_repo import UserRepository
from schemas.user_schema import UserCreate
from core.security import get_password_hash, verify_password
from core.exceptions import DuplicateUserError, InvalidCredentialsError

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.user_repo = UserRepository(db)
        self.db = db

    def register_user(self, user_data: UserCreate):
        # 1. Kiểm tra trùng username
        if self.user_repo.get_by_username(user_data.username):
            logger.info("Registration failed with username %s", user_data.username)
            raise DuplicateUserError("Username already exists")

        # 2. Kiểm tra trùng email
        if self.user_repo.get_by_email(user_data.email):
            logger.info("Registration failed with email %s", user_data.email)
            raise DuplicateUserError("Email already in use")

        # 3. Hash mật khẩu rồi tạo user
        hashed_pwd = get_password_hash(user_data.password)
        user = self.user_repo.create_user(user_data, hashed_pwd)
        logger.info("User %s registered", user.username)
        return user

    def authenticate_user(self, username: str, password: str):
        if not username or not username.strip() or not password or not password.strip():
            raise InvalidCredentialsError()

        user = self.user_repo.get_by_username(username)
        if not user or not user.is_active:
            return None

        if not verify_password(password, user.password_hash):
            return None

        return user
