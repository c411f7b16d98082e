# settings.py
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

LOOKUP_PATH = "/api/getAddresses"


def _address_api_url() -> Optional[str]:
    explicit = os.getenv("ADDRESS_API_URL")
    if explicit:
        return explicit
    public_url = os.getenv("PUBLIC_URL")
    if public_url:
        return f"{public_url.rstrip('/')}{LOOKUP_PATH}"
    return None


class Settings:
    """Application settings (env vars)."""
    # — Address lookup
    ADDRESS_API_URL       = _address_api_url()
    ADDRESS_API_TIMEOUT   = float(os.getenv("ADDRESS_API_TIMEOUT", "30"))

    # — Address book
    ADDRESS_BOOK_BACKEND  = os.getenv("ADDRESS_BOOK_BACKEND", "memory")
    ADDRESS_BOOK_KEY      = os.getenv("ADDRESS_BOOK_KEY", "address_book:entries")

    # — Redis
    REDIS_URL             = os.getenv("REDIS_URL", "redis://localhost:6379/0")

    # — Logging / metrics
    LOG_LEVEL             = os.getenv("LOG_LEVEL", "INFO")
    LOG_JSON              = os.getenv("LOG_JSON", "").lower() in ("1", "true", "yes")
    APP_METRICS_PORT      = int(os.getenv("APP_METRICS_PORT", "8082"))

settings = Settings()
