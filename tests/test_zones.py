def test_zone_defaults_to_active(client):
    r = client.post("/api/v1/zones/", json={"name": "Roof"})
    assert r.status_code == 201
    body = r.json()
    assert body["is_active"] is True
    assert body["description"] is None


def test_list_zones(client, make_zone):
    make_zone(name="A")
    make_zone(name="B")
    names = [z["name"] for z in client.get("/api/v1/zones/").json()]
    assert names == ["A", "B"]


def test_partial_update_keeps_other_fields(client, make_zone):
    zone = make_zone(name="Basement", description="cold")
    r = client.patch(f"/api/v1/zones/{zone['id']}", json={"is_active": False})
    assert r.status_code == 200
    body = r.json()
    assert body["is_active"] is False
    assert body["name"] == "Basement"
    assert body["description"] == "cold"


def test_delete_active_zone_is_blocked(client, make_zone):
    zone = make_zone()
    r = client.delete(f"/api/v1/zones/{zone['id']}")
    assert r.status_code == 400
    assert r.json()["error"] == "ZONE_IS_ACTIVE"


def test_devices_block_zone_delete_before_active_flag(client, make_zone, make_device):
    zone = make_zone()
    make_device(zone_id=zone["id"])

    # both guards fail: the device check wins
    r = client.delete(f"/api/v1/zones/{zone['id']}")
    assert r.status_code == 400
    assert r.json()["error"] == "ZONE_HAS_DEVICES"

    client.patch(f"/api/v1/zones/{zone['id']}", json={"is_active": False})
    r = client.delete(f"/api/v1/zones/{zone['id']}")
    assert r.json()["error"] == "ZONE_HAS_DEVICES"


def test_delete_inactive_empty_zone(client, make_zone):
    zone = make_zone(is_active=False)
    r = client.delete(f"/api/v1/zones/{zone['id']}")
    assert r.status_code == 200
    assert r.json()["id"] == zone["id"]
    assert client.get(f"/api/v1/zones/{zone['id']}").status_code == 404


def test_missing_zone(client):
    assert client.get("/api/v1/zones/42").status_code == 404
    assert client.patch("/api/v1/zones/42", json={"name": "x"}).status_code == 404
    r = client.delete("/api/v1/zones/42")
    assert r.status_code == 404
    assert r.json()["error"] == "ZONE_NOT_FOUND"
