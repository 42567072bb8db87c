from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from shiftboard.config import Settings
from shiftboard.main import create_application
from shiftboard.services.scheduling_service import SchedulingService

MORNING_START = datetime(2026, 10, 18, 7, 15)
MORNING_END = datetime(2026, 10, 18, 11, 15)


@pytest.fixture
def service():
    return SchedulingService(location="Duisburg")


@pytest.fixture
def strict_service():
    return SchedulingService(location="Duisburg", enforce_capacity=True)


@pytest.fixture
def block(service):
    return service.create_block("Früh – Objekt A", MORNING_START, MORNING_END, capacity=1)


def _settings(**overrides) -> Settings:
    values = {"seed_demo_blocks": False, "log_level": "WARNING", "debug": False}
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def client():
    app = create_application(_settings())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def strict_client():
    app = create_application(_settings(enforce_capacity=True))
    with TestClient(app) as test_client:
        yield test_client
