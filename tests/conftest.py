"""Pytest configuration and fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from src.power_records import ArcFlash, Bus, DataSet, LVBreaker


@pytest.fixture
async def client():
    """Async test client fixture."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def old_dataset():
    """Small snapshot with equipment and arc flash results."""
    return DataSet(
        buses=[
            Bus(id="BUS-1", base_kv="13.8"),
            Bus(id="BUS-2", base_kv="0.48"),
        ],
        lv_breakers=[
            LVBreaker(id="CB-1", trip="Electronic", ltpu_mult="1.0"),
        ],
        arc_flash=[
            ArcFlash(id="BUS-1", scenario="Main-Max", incident_energy="8.5"),
            ArcFlash(id="BUS-1", scenario="Main-Min", incident_energy="6.1"),
        ],
    )


@pytest.fixture
def new_dataset():
    """Next revision of old_dataset: one bus removed, one added, one modified."""
    return DataSet(
        buses=[
            Bus(id="BUS-1", base_kv="4.16"),
            Bus(id="BUS-3", base_kv="0.208"),
        ],
        lv_breakers=[
            LVBreaker(id="CB-1", trip="Electronic", ltpu_mult="1.0"),
        ],
        arc_flash=[
            ArcFlash(id="BUS-1", scenario="Main-Max", incident_energy="9.1"),
            ArcFlash(id="BUS-1", scenario="Main-Min", incident_energy="6.1"),
        ],
    )
