"""
Environment-aware configuration.
Signing secrets, token lifetime, database and upload settings are read
once here; the app factory turns them into long-lived objects.
"""
import os
import tempfile
from dotenv import load_dotenv
from datetime import timedelta

load_dotenv()  # Read .env if present


def _int_or_none(value):
    return int(value) if value not in (None, "") else None


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")  # Set a strong key in production
    DEBUG = False
    TESTING = False
    # CORS: in dev we usually allow '*', in prod supply a comma-separated list in env
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    APP_ENV = os.getenv("APP_ENV", "dev")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Two independent secrets; create_app refuses to start if they match
    ACCESS_SECRET_KEY = os.getenv("ACCESS_SECRET_KEY", "dev-access-secret-change-me-0123456789")
    REFRESH_SECRET_KEY = os.getenv("REFRESH_SECRET_KEY", "dev-refresh-secret-change-me-0123456789")
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRES = timedelta(minutes=15)
    # None keeps every refresh token a user was ever issued
    MAX_REFRESH_TOKENS_PER_USER = _int_or_none(os.getenv("MAX_REFRESH_TOKENS_PER_USER"))

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///blog.db")

    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(os.getcwd(), "uploads"))
    PUBLIC_FILE_BASE_URL = os.getenv("PUBLIC_FILE_BASE_URL", "/file")
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(10 * 1024 * 1024)))
    ALLOWED_IMAGE_EXTENSIONS = set(
        os.getenv("ALLOWED_IMAGE_EXTENSIONS", "png,jpg,jpeg,gif,webp").split(",")
    )


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class TestingConfig(BaseConfig):
    TESTING = True
    DATABASE_URL = "sqlite://"
    ACCESS_SECRET_KEY = "test-access-secret-0123456789abcdef"
    REFRESH_SECRET_KEY = "test-refresh-secret-0123456789abcdef"
    MAX_REFRESH_TOKENS_PER_USER = None
    UPLOAD_FOLDER = os.path.join(tempfile.gettempdir(), "blog-api-test-uploads")


class ProductionConfig(BaseConfig):
    DEBUG = False


def get_config(name: str | None):
    """
    Select config class.
    - If name is provided, choose by name.
    - Else choose based on APP_ENV (dev/test/prod).
    """
    env = (name or os.getenv("APP_ENV", "dev")).lower()
    if env in ["prod", "production"]:
        return ProductionConfig
    if env in ["test", "testing"]:
        return TestingConfig
    return DevelopmentConfig
