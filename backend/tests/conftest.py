import os
import sys
import tempfile
from pathlib import Path

import pytest

_TMP_DIR = tempfile.mkdtemp(prefix="resumeforge-tests-")

# Settings are read at import time, so point them at throwaway resources first
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR}/test.db"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_DIR, "uploads")
os.environ["EMAIL_BACKEND"] = "console"
os.environ["LOG_LEVEL"] = "WARNING"

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from resumeforge.core.database import Base, engine, SessionLocal  # noqa: E402
import resumeforge.models  # noqa: E402,F401


@pytest.fixture
def db_session():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    from resumeforge.main import app

    with TestClient(app) as test_client:
        yield test_client
