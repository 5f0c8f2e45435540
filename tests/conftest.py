from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.db import MemStorage, seed_sample_data
from app.main import create_app


class TickingClock:
    """Reloj controlado: cada llamada avanza `step`."""

    def __init__(self, start=datetime(2024, 1, 1, tzinfo=timezone.utc), step=timedelta(minutes=1)):
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture
def clock():
    return TickingClock()

@pytest.fixture
def storage(clock):
    return MemStorage(clock=clock)

@pytest.fixture
def seeded_storage(clock):
    s = MemStorage(clock=clock)
    seed_sample_data(s)
    return s

@pytest.fixture
def client(storage):
    return TestClient(create_app(storage))

@pytest.fixture
def seeded_client(seeded_storage):
    return TestClient(create_app(seeded_storage))
