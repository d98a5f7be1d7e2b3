"""
Database session management
"""
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker

from plastics_catalog.core.config import settings

logger = logging.getLogger(__name__)

database_url = make_url(settings.database_url)

logger.info(f"Database connection: {database_url.render_as_string(hide_password=True)}")

engine_kwargs = {
    "echo": settings.DB_ECHO,
    "pool_pre_ping": True,  # Verify connections before using
}
if database_url.get_backend_name() == "sqlite":
    engine_kwargs["connect_args"] = {"check_same_thread": False}
else:
    engine_kwargs["pool_recycle"] = 3600  # Recycle connections after 1 hour

engine = create_engine(database_url, **engine_kwargs)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """
    Dependency for getting database session

    Usage in FastAPI endpoints:
        @router.get("/materials")
        def list_materials(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
