"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Runtime environment
    APP_ENV = os.getenv("APP_ENV", "production")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5000"))
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")

    # Session
    JWT_SECRET = os.getenv("JWT_SECRET", "")
    JWT_ALGORITHM = "HS256"
    JWT_EXPIRES_DAYS = int(os.getenv("JWT_EXPIRES_DAYS", "30"))
    SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "jwt")

    # Identity
    PASSWORD_HASH_ITERATIONS = int(os.getenv("PASSWORD_HASH_ITERATIONS", "200000"))
    AVATAR_BASE_URL = os.getenv(
        "AVATAR_BASE_URL", "https://avatar.iran.liara.run/public"
    )

    # Postgresql connection string is read by prisma itself from DATABASE_URL

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    @classmethod
    def is_development(cls) -> bool:
        return cls.APP_ENV == "development"


class TestingConfig(Config):
    """Testing configuration: fixed secret fallback and cheap password hashing"""

    JWT_SECRET = os.getenv("JWT_SECRET", "test-secret")
    PASSWORD_HASH_ITERATIONS = 1000
