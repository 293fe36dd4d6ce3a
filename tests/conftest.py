# tests/conftest.py
import os
import shutil
import sys
import tempfile
from pathlib import Path

# Settings are read at import time, so the environment must be in place first
TEST_ROOT = Path(tempfile.mkdtemp(prefix="portfolio-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_ROOT / 'test.db'}"
os.environ["ADMIN_PASSWORD"] = "admin-secret"
os.environ["ADMIN_EDIT_PASSWORD"] = "edit-secret"
os.environ["MEDIA_DIR"] = str(TEST_ROOT / "uploads")
os.environ["MEDIA_URL_PATH"] = "/uploads"
os.environ["LOG_DIR"] = str(TEST_ROOT / "logs")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
from fastapi.testclient import TestClient

from core.config import settings
from core.database import Base, SessionLocal, engine
from main import app

ADMIN_PASSWORD = "admin-secret"
EDIT_PASSWORD = "edit-secret"


@pytest.fixture(autouse=True)
def fresh_database():
    """Every test starts from empty tables and an empty upload directory."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    shutil.rmtree(settings.MEDIA_DIR, ignore_errors=True)
    os.makedirs(settings.MEDIA_DIR, exist_ok=True)
    yield


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c


def _login(password: str) -> TestClient:
    c = TestClient(app)
    resp = c.post("/admin/login", data={"password": password})
    assert resp.status_code == 200, resp.text
    c.headers["Authorization"] = f"Bearer {resp.json()['access_token']}"
    return c


@pytest.fixture()
def admin_client():
    """Logged in with the admin password only: may add projects, not edit them."""
    with _login(ADMIN_PASSWORD) as c:
        yield c


@pytest.fixture()
def editor_client():
    with _login(EDIT_PASSWORD) as c:
        yield c
