# app/core/database.py
from loguru import logger
from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import get_settings
from app.core.errors import StoreFailure

settings = get_settings()

_is_sqlite = settings.DATABASE_URL.startswith("sqlite")
connect_args = {"check_same_thread": False} if _is_sqlite else {}
engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, echo=settings.SQL_ECHO)

if _is_sqlite:
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db() -> None:
    # Register both tables on the metadata before creating them
    import app.comment.models  # noqa: F401
    import app.ticket.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


# Common DB dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def commit(db: Session, operation: str, **context) -> None:
    """Commit the session, turning driver failures into StoreFailure.

    The session is rolled back and the failure logged with ``operation`` and
    the entity ids passed as ``context``.
    """
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.opt(exception=exc).error(
            "Database error during {operation} {context}", operation=operation, context=context
        )
        raise StoreFailure() from exc
