import pytest
from fastapi.testclient import TestClient

import app as web
import main


@pytest.fixture
def web_client():
    """Flask test client with a fresh calculator session."""
    web.ACTIVE_SESSION.reset()
    web.app.config["TESTING"] = True
    with web.app.test_client() as client:
        yield client
    web.ACTIVE_SESSION.reset()


@pytest.fixture
def api_client():
    return TestClient(main.app)
