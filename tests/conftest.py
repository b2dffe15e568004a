from __future__ import annotations

import pytest

from app import create_app
from config import GarageConfig
from models import create_car


@pytest.fixture
def cars():
    return [create_car(str(i)) for i in range(10)]


@pytest.fixture
def app():
    flask_app = create_app(GarageConfig(levels=2, lots_per_level=2, log_level="DEBUG"))
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
