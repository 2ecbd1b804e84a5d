import mongomock
import pytest
from fastapi.testclient import TestClient

from hubsy.config.database import MongoConnection
from hubsy.config.settings import Settings
from hubsy.main import create_app

LESSONS = [
    {"title": "Math", "location": "Hendon", "spaces": 5, "price": 100, "image": "math.png"},
    {"title": "English", "location": "Colindale", "spaces": 5, "price": 80, "image": "english.png"},
    {"title": "Music", "location": "Brent Cross", "spaces": 3, "price": 90, "image": "music.png"},
    {"title": "Chess", "location": "Mathura Hall", "spaces": 0, "price": 60, "image": "chess.png"},
]


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture
def db(mongo_client):
    database = mongo_client["hubsy"]
    database["lessons"].insert_many([dict(lesson) for lesson in LESSONS])
    return database


@pytest.fixture
def connection(mongo_client, db):
    return MongoConnection.from_client(mongo_client, "hubsy")


@pytest.fixture
def images_dir(tmp_path):
    folder = tmp_path / "images"
    folder.mkdir()
    return folder


@pytest.fixture
def settings(images_dir):
    return Settings(mongo_uri="mongodb://unused", images_dir=images_dir)


@pytest.fixture
def app(settings, connection):
    return create_app(settings, connection=connection)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def lessons():
    return [dict(lesson) for lesson in LESSONS]
