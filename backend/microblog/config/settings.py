"""Application configuration settings"""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}

# Published in the source, so only usable for local development
DEV_SESSION_SECRET = "microblog-development-session-secret-change-me"


class Config:
    # Runtime
    APP_ENV = os.getenv("APP_ENV", "development")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))

    # Session / auth
    SESSION_SECRET = os.getenv("SESSION_SECRET", DEV_SESSION_SECRET)
    SERVICE_AUTH_ISSUER = os.getenv("SERVICE_AUTH_ISSUER", "microblog")
    SERVICE_AUTH_AUDIENCE = os.getenv("SERVICE_AUTH_AUDIENCE", "microblog-web")
    SESSION_TTL_SECONDS = int(os.getenv("SESSION_TTL_SECONDS", "86400"))
    SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "microblog_session")
    SESSION_COOKIE_SECURE = (
        os.getenv("SESSION_COOKIE_SECURE", "false").lower() in _TRUTHY
    )
    MIN_PASSWORD_LENGTH = int(os.getenv("MIN_PASSWORD_LENGTH", "6"))

    # Redirect targets
    ROOT_PATH = os.getenv("ROOT_PATH", "/")
    SIGN_IN_PATH = os.getenv("SIGN_IN_PATH", "/users/sign_in")

    # Storage: "memory" or "prisma"
    STORE_BACKEND = os.getenv("STORE_BACKEND", "memory").lower()

    # Views
    TEMPLATE_DIR = os.getenv(
        "TEMPLATE_DIR", str(Path(__file__).resolve().parent.parent / "templates")
    )

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s",
    )

    @classmethod
    def validate(cls) -> None:
        """Refuse to serve outside development with the published session secret."""
        if cls.APP_ENV != "development" and cls.SESSION_SECRET == DEV_SESSION_SECRET:
            raise RuntimeError(
                f"SESSION_SECRET must be set when APP_ENV is {cls.APP_ENV!r}"
            )
