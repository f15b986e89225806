import os
from dotenv import load_dotenv

# Đọc file .env (nếu có) trước khi lấy biến môi trường
load_dotenv()


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """Application settings read from environment variables (.env supported)."""

    def __init__(self):
        self.DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./messaging.db")
        self.SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me-in-production")
        self.ALGORITHM = os.getenv("ALGORITHM", "HS256")
        self.ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 30))
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_DIR = os.getenv("LOG_DIR") or None
        self.CORS_ORIGINS = _split_csv(os.getenv("CORS_ORIGINS", "*"))

        if not self.SECRET_KEY:
            raise ValueError("Missing SECRET_KEY in environment (.env)")


settings = Settings()
