import os
import tempfile

import pytest

# The package reads its connection string at import time.
_fd, _db_path = tempfile.mkstemp(suffix=".sqlite3")
os.close(_fd)
os.environ["DATABASE_URL"] = f"sqlite:///{_db_path}"


@pytest.fixture(autouse=True)
def db():
    from playlist.config import db
    import playlist.types
    db.create_all()
    yield db
    db.drop_all()


@pytest.fixture
def client():
    from playlist.app import app
    app.config['TESTING'] = True
    with app.test_client() as c:
        yield c


def pytest_unconfigure(config):
    if os.path.exists(_db_path):
        os.remove(_db_path)
