import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Must be set before app.py is imported
os.environ['FLASK_ENV'] = 'testing'

from services import MemoryStore  # noqa: E402


class FailingStore:
    """Store whose reads find nothing and whose writes never stick."""

    def __init__(self):
        self.writes = 0

    def get(self, key):
        return None

    def set(self, key, value):
        self.writes += 1
        return False


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def app():
    from app import app as flask_app, db
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()
