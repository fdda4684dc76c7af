"""Shared fixtures: the packaged default data and small door builders."""

import pytest

from configurator.config import load_defaults
from configurator.models import DoorConfiguration, ProjectInfo, SavedDoor


@pytest.fixture(scope="session")
def settings():
    return load_defaults()


@pytest.fixture
def catalog(settings):
    return settings.catalog


@pytest.fixture
def matrix(settings):
    return settings.matrix


@pytest.fixture
def project():
    return ProjectInfo(customer_name="Tanaka", construction_location="Tokyo")


@pytest.fixture
def make_door():
    """Build a SavedDoor from DoorConfiguration keyword arguments."""
    counter = {"n": 0}

    def _make(room_name="", price=0, **config):
        counter["n"] += 1
        return SavedDoor(
            id=f"wd-{counter['n']}",
            config=DoorConfiguration(**config),
            price=price,
            room_name=room_name,
        )

    return _make
