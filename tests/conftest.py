import os
import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

# Config de test AVANT d'importer joti (Settings lit l'env à l'import)
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["EDITCODE_ROUNDS"] = "4"  # bcrypt rapide pour les tests

import random
from datetime import datetime

import pytest

from joti.core import database
from joti.core.database import Base
from joti.main import app

test_engine = database.engine
TestingSessionLocal = database.SessionLocal

# Date fixe pour les tests qui manipulent le temps
FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0)


@pytest.fixture(autouse=True)
def setup_teardown():
    """Crée et nettoie la DB avant/après chaque test"""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


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


@pytest.fixture
def rng():
    """Random déterministe pour les codes d'édition"""
    return random.Random(1234)


@pytest.fixture
def fixed_now():
    return lambda: FIXED_NOW
