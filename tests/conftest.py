import os

# point the app at a throwaway in-memory database before it is imported
os.environ["BUDGET_DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from backend.app.db import Base, engine, init_db
from backend.app.main import app


@pytest.fixture
def client():
    init_db()
    try:
        yield TestClient(app)
    finally:
        Base.metadata.drop_all(bind=engine)
