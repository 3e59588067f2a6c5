"""Pytest configuration and fixtures for Datekit tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datekit can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datekit.units.timezone import Timezone  # noqa: E402
from datekit.units.zonedb import ZoneDatabase  # noqa: E402


@pytest.fixture(scope="session")
def zones() -> ZoneDatabase:
    """Zone database backed by the bundled tzdata package."""
    return ZoneDatabase()


@pytest.fixture
def new_york(zones: ZoneDatabase) -> Timezone:
    return Timezone.named("America/New_York", zones)


@pytest.fixture
def paris(zones: ZoneDatabase) -> Timezone:
    return Timezone.named("Europe/Paris", zones)
