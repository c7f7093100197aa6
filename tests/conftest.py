import os
import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

# SQLite pour les tests AVANT d'importer app (pas besoin de postgres)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///./test.db"
os.environ["DATABASE_URL"] = SQLALCHEMY_TEST_DATABASE_URL

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

test_engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

# PATCH: remplacer le engine et SessionLocal du core.database AVANT d'importer app
import app.core.database
app.core.database.engine = test_engine
app.core.database.SessionLocal = TestingSessionLocal

# Maintenant importer app (qui utilisera notre engine SQLite)
from app.core.database import Base, get_db
from app.main import app


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_teardown():
    """Crée et nettoie la DB avant/après chaque test"""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


# Override la dépendance
app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def client():
    """Client de test FastAPI"""
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture
def db():
    """Session DB pour les tests"""
    db = TestingSessionLocal()
    yield db
    db.close()


def make_component(type_="Text", id_="text-1", props=None, children=None):
    node = {"type": type_, "id": id_, "props": props if props is not None else {}}
    if children is not None:
        node["children"] = children
    return node


@pytest.fixture
def page_payload():
    """Fabrique de payloads de création valides"""
    def _make(slug="home", title="Home", components=None, metadata=None):
        payload = {
            "slug": slug,
            "title": title,
            "components": components if components is not None else [
                make_component("Hero", "hero-1", {"title": "Welcome", "subtitle": None}),
                make_component("Section", "section-1", {"title": "News"}, children=[
                    make_component("ArticleCard", "card-1", {"title": "First", "tags": ["a", "b"]}),
                    make_component("Text", "text-1", {"content": "Hello"}),
                ]),
            ],
        }
        if metadata is not None:
            payload["metadata"] = metadata
        return payload
    return _make
