import pytest


@pytest.fixture()
def owner(make_user):
    return make_user()


@pytest.fixture()
def zone(make_zone):
    return make_zone()


def device_payload(owner, zone, **extra):
    payload = {"serial_number": "SN-100", "owner_id": owner["id"], "zone_id": zone["id"]}
    payload.update(extra)
    return payload


def test_create_device(client, owner, zone, make_sensor):
    s1 = make_sensor()
    s2 = make_sensor(type="humidity", unit="%")
    r = client.post("/api/v1/devices/", json=device_payload(
        owner, zone, model="GW-1", installed_at="2024-05-01T08:00:00", sensors=[s1["id"], s2["id"]],
    ))
    assert r.status_code == 201
    body = r.json()
    assert body["id"] > 0
    assert body["status"] == "active"
    assert body["sensors"] == [s1["id"], s2["id"]]
    assert body["owner_id"] == owner["id"]


def test_duplicate_serial_number(client, owner, zone):
    assert client.post("/api/v1/devices/", json=device_payload(owner, zone)).status_code == 201
    r = client.post("/api/v1/devices/", json=device_payload(owner, zone))
    assert r.status_code == 400
    assert r.json()["error"] == "SERIAL_NUMBER_IN_USE"
    assert len(client.get("/api/v1/devices/").json()) == 1


def test_serial_checked_before_references(client, owner, zone, make_device):
    existing = make_device()
    r = client.post("/api/v1/devices/", json={
        "serial_number": existing["serial_number"], "owner_id": 999, "zone_id": 999,
    })
    assert r.json()["error"] == "SERIAL_NUMBER_IN_USE"


def test_unknown_owner(client, zone):
    r = client.post("/api/v1/devices/", json={"serial_number": "X", "owner_id": 999, "zone_id": zone["id"]})
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_USER"


def test_owner_checked_before_zone(client):
    r = client.post("/api/v1/devices/", json={"serial_number": "X", "owner_id": 999, "zone_id": 999})
    assert r.json()["error"] == "INVALID_USER"


def test_unknown_zone(client, owner):
    r = client.post("/api/v1/devices/", json={"serial_number": "X", "owner_id": owner["id"], "zone_id": 999})
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_ZONE"


def test_unknown_sensor_in_set(client, owner, zone, make_sensor):
    sensor = make_sensor()
    r = client.post("/api/v1/devices/", json=device_payload(owner, zone, sensors=[sensor["id"], 999]))
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_SENSORS"
    assert client.get("/api/v1/devices/").json() == []


def test_repeated_sensor_ids_are_stored_once(client, owner, zone, make_sensor):
    sensor = make_sensor()
    r = client.post("/api/v1/devices/", json=device_payload(owner, zone, sensors=[sensor["id"], sensor["id"]]))
    assert r.status_code == 201
    assert r.json()["sensors"] == [sensor["id"]]


def test_unknown_status_is_rejected(client, owner, zone):
    r = client.post("/api/v1/devices/", json=device_payload(owner, zone, status="broken"))
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_PAYLOAD"


def test_update_only_validates_supplied_fields(client, make_device):
    device = make_device()
    r = client.patch(f"/api/v1/devices/{device['id']}", json={"status": "maintenance"})
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "maintenance"
    assert body["serial_number"] == device["serial_number"]


def test_update_keeping_own_serial(client, make_device):
    device = make_device()
    r = client.patch(f"/api/v1/devices/{device['id']}", json={"serial_number": device["serial_number"]})
    assert r.status_code == 200


def test_update_to_other_devices_serial(client, make_device):
    first = make_device()
    second = make_device()
    r = client.patch(f"/api/v1/devices/{second['id']}", json={"serial_number": first["serial_number"]})
    assert r.status_code == 400
    assert r.json()["error"] == "SERIAL_NUMBER_IN_USE"


def test_update_references(client, make_device, make_user, make_zone, make_sensor):
    device = make_device()
    new_owner = make_user()
    new_zone = make_zone(name="Yard")
    sensor = make_sensor()

    r = client.patch(f"/api/v1/devices/{device['id']}", json={"zone_id": 999})
    assert r.json()["error"] == "INVALID_ZONE"
    r = client.patch(f"/api/v1/devices/{device['id']}", json={"owner_id": 999})
    assert r.json()["error"] == "INVALID_USER"
    r = client.patch(f"/api/v1/devices/{device['id']}", json={"sensors": [999]})
    assert r.json()["error"] == "INVALID_SENSORS"

    r = client.patch(f"/api/v1/devices/{device['id']}", json={
        "owner_id": new_owner["id"], "zone_id": new_zone["id"], "sensors": [sensor["id"]],
    })
    assert r.status_code == 200
    body = r.json()
    assert (body["owner_id"], body["zone_id"], body["sensors"]) == (new_owner["id"], new_zone["id"], [sensor["id"]])

    r = client.patch(f"/api/v1/devices/{device['id']}", json={"sensors": []})
    assert r.status_code == 200
    assert r.json()["sensors"] == []


def test_update_rejects_null_reference(client, make_device):
    device = make_device()
    r = client.patch(f"/api/v1/devices/{device['id']}", json={"owner_id": None})
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_PAYLOAD"


def test_update_missing_device_skips_validation(client):
    r = client.patch("/api/v1/devices/999", json={"owner_id": 12345, "zone_id": 12345})
    assert r.status_code == 404
    assert r.json()["error"] == "DEVICE_NOT_FOUND"


def test_delete_device_releases_owner(client, make_device):
    device = make_device()
    r = client.delete(f"/api/v1/devices/{device['id']}")
    assert r.status_code == 200
    assert r.json() == {"message": "Device deleted", "id": device["id"]}
    assert client.delete(f"/api/v1/users/{device['owner_id']}").status_code == 200
    assert client.delete(f"/api/v1/devices/{device['id']}").status_code == 404
