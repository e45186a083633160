from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
import logging

from string_analyzer.config import DATABASE_URL

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------------------
# DATABASE ENGINE & SESSION
# ------------------------------------------------------------------------------


def build_engine(url: str, **kwargs):
    """Create an engine with the options each backend needs."""
    if url.startswith("sqlite"):
        # FastAPI may hand the session to a different thread than the one that opened it
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)   # prevents "server has gone away" issues
        kwargs.setdefault("pool_recycle", 280)     # helps with idle connection timeouts
    return create_engine(url, **kwargs)


try:
    engine = build_engine(DATABASE_URL)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base = declarative_base()
except Exception as e:
    logger.error(f"Failed to create SQLAlchemy engine: {e}")
    raise


# ------------------------------------------------------------------------------
# DB DEPENDENCY
# ------------------------------------------------------------------------------
def get_db():
    """Dependency to provide a DB session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ------------------------------------------------------------------------------
# INITIALIZATION
# ------------------------------------------------------------------------------
def init_db(bind=None):
    """Initialize database tables (runs once on startup)."""
    from string_analyzer.models import string_record  # noqa: F401  ensure models are imported
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables created successfully.")
