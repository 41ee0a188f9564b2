"""
Shared fixtures: a fresh app over in-memory SQLite for every test, plus
small factories that create records through the HTTP API.
"""
import logging

import pytest
from fastapi.testclient import TestClient

from iot_fleet.database import Settings
from iot_fleet.main import create_app
from iot_fleet.models import Base
from iot_fleet.store import FleetStore

logging.getLogger("iot_fleet").setLevel(logging.WARNING)


@pytest.fixture()
def settings():
    return Settings(database_url="sqlite://", log_level="WARNING", seed_demo_data=False)


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def store(app):
    """Direct store access, bypassing HTTP."""
    Base.metadata.create_all(bind=app.state.engine)
    db = app.state.session_factory()
    try:
        yield FleetStore(db)
    finally:
        db.close()


@pytest.fixture()
def make_user(client):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {
            "name": f"User {counter['n']}",
            "email": f"user{counter['n']}@example.com",
            "password": "secret",
            "role": "technician",
        }
        payload.update(overrides)
        r = client.post("/api/v1/users/", json=payload)
        assert r.status_code == 201, r.text
        return r.json()
    return _make


@pytest.fixture()
def make_zone(client):
    def _make(**overrides):
        payload = {"name": "Warehouse", "description": "Ground floor"}
        payload.update(overrides)
        r = client.post("/api/v1/zones/", json=payload)
        assert r.status_code == 201, r.text
        return r.json()
    return _make


@pytest.fixture()
def make_sensor(client):
    def _make(**overrides):
        payload = {"type": "temperature", "unit": "°C", "model": "DHT22", "location": "rack 1"}
        payload.update(overrides)
        r = client.post("/api/v1/sensors/", json=payload)
        assert r.status_code == 201, r.text
        return r.json()
    return _make


@pytest.fixture()
def make_device(client, make_user, make_zone):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {"serial_number": f"SN-{counter['n']:04d}", "model": "GW-100"}
        if "owner_id" not in overrides:
            payload["owner_id"] = make_user()["id"]
        if "zone_id" not in overrides:
            payload["zone_id"] = make_zone()["id"]
        payload.update(overrides)
        r = client.post("/api/v1/devices/", json=payload)
        assert r.status_code == 201, r.text
        return r.json()
    return _make
