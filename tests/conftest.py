import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient

from tick.main import create_app
from tick.services.store import Store


@pytest.fixture
def store(tmp_path):
    """Store SQLite neuf pour chaque test"""
    store = Store.open(str(tmp_path / "test.db"))
    store.migrate()
    yield store
    store.close()


@pytest.fixture
def static_dir(tmp_path):
    """Petit client web factice"""
    web = tmp_path / "web"
    web.mkdir()
    (web / "index.html").write_text("<html><body>tick</body></html>")
    return web


@pytest.fixture
def client(store, static_dir):
    """Client de test FastAPI"""
    app = create_app(store, static_dir=str(static_dir))
    return TestClient(app)
