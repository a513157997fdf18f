# tests/conftest.py
import os
import tempfile

_TEST_DB_DIR = tempfile.mkdtemp(prefix="support-tickets-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DB_DIR, 'test.db')}"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest

from app.core.database import Base, SessionLocal, engine
from app.main import app  # noqa: F401  (creates the tables, registers the models)


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
