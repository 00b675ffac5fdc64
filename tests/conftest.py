"""Pytest configuration and fixtures."""

import pytest

from warriorapi.api.app import create_app
from warriorapi.engine.critical import CriticalRoller
from warriorapi.store.warrior_store import WarriorStore


class FixedRandom:
    """Random source that always draws the same value."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        return self.value


@pytest.fixture
def warrior_payload():
    """Full warrior payload (wire field names) without an id."""
    return {
        "name": "Test Warrior",
        "strength": 8,
        "agility": 6,
        "intellect": 4,
        "luck": 5,
        "health": 100,
        "attack": 10,
        "attackSpeed": 1.5,
        "criticalChance": 0.1,
        "criticalFactor": 2,
        "money": 50,
    }


@pytest.fixture
def always_critical():
    """Random source whose draws always land under any positive chance."""
    return FixedRandom(0.0)


@pytest.fixture
def never_critical():
    """Random source whose draws never land under a chance <= 0.99."""
    return FixedRandom(0.99)


@pytest.fixture
def store():
    """Empty warrior store using the default id policy."""
    return WarriorStore(id_policy="client_or_next")


@pytest.fixture
def app(store, never_critical):
    """Warrior API app wired to the test store and a non-critical roller."""
    flask_app = create_app(store=store, roller=CriticalRoller(never_critical))
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    """Test client for the warrior API."""
    return app.test_client()
