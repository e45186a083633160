import os
import logging
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables only for local development
if os.path.exists('.env'):
    load_dotenv()
    logger.info("Loading from .env file (local development)")

# ------------------------------------------------------------------------------
# DATABASE
# ------------------------------------------------------------------------------

DEFAULT_DATABASE_URL = "sqlite:///./strings.db"


def normalize_database_url(url: str) -> str:
    """Rewrite provider-style URLs into the dialect names SQLAlchemy expects."""
    if url.startswith("mysql://"):
        # SQLAlchemy expects "mysql+pymysql://"
        return url.replace("mysql://", "mysql+pymysql://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


DATABASE_URL = normalize_database_url(os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL)

# ------------------------------------------------------------------------------
# HTTP / PROCESS
# ------------------------------------------------------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
PORT = int(os.getenv("PORT", 8000))
