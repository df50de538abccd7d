"""
API tests - REST surface over one configurator session (TestClient)
"""

from fastapi.testclient import TestClient

from api.dependencies import set_service_container
from api.main import create_app
from engine.code_projector import to_document, to_snippet


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_get_config(client):
    response = client.get("/api/v1/config")
    body = response.json()

    assert response.status_code == 200
    assert body["primaryColor"] == "#9333EA"
    assert body["componentOrder"] == ["email", "sms", "social", "passkey", "external"]
    assert list(body)[:3] == ["email", "sms", "social"]


def test_patch_merges_partial(client, services):
    response = client.patch("/api/v1/config", json={"sms": True, "primaryColor": "rgb(59, 130, 246)"})
    body = response.json()

    assert response.status_code == 200
    assert body["sms"] is True
    assert body["primaryColor"] == "#3B82F6"
    assert body["theme"] == "dark"
    assert services.config_store.current().sms is True
    print('✓ test_patch_merges_partial')


def test_patch_unknown_field(client, services):
    response = client.patch("/api/v1/config", json={"sms": True, "colour": "red"})
    error = response.json()["error"]

    assert response.status_code == 422
    assert error["code"] == "UNKNOWN_CONFIG_FIELD"
    assert error["details"]["fields"] == ["colour"]
    assert services.config_store.current().sms is False


def test_patch_bad_value(client):
    response = client.patch("/api/v1/config", json={"theme": "sepia"})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "INVALID_CONFIG_VALUE"
    assert response.json()["error"]["details"]["field"] == "theme"


def test_reorder(client):
    client.patch("/api/v1/config", json={"sms": True})

    response = client.post("/api/v1/config/reorder", json={"sourceId": "sms", "targetId": "passkey"})

    assert response.status_code == 200
    assert response.json() == {
        "changed": True,
        "componentOrder": ["email", "social", "passkey", "sms", "external"],
    }


def test_reorder_no_op(client):
    identity = client.post("/api/v1/config/reorder", json={"sourceId": "email", "targetId": "email"})
    outside = client.post("/api/v1/config/reorder", json={"sourceId": "email", "targetId": None})

    for response in (identity, outside):
        assert response.status_code == 200
        assert response.json()["changed"] is False
        assert response.json()["componentOrder"] == ["email", "sms", "social", "passkey", "external"]


def test_reorder_missing_source(client):
    response = client.post("/api/v1/config/reorder", json={"targetId": "email"})
    body = response.json()

    assert response.status_code == 422
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["validation_errors"][0]["field"] == "sourceId"


def test_visible_blocks(client):
    response = client.get("/api/v1/config/blocks")

    assert response.json() == {"blocks": ["email", "social", "passkey", "external"], "count": 4}


def test_set_primary_color(client):
    response = client.put("/api/v1/config/primary-color", json={"value": "rgba(16, 185, 129, 0.4)"})
    body = response.json()

    assert body["changed"] is True
    assert body["primary_color"] == "#10B981"
    assert body["representations"]["rgb"] == "rgb(16, 185, 129)"


def test_set_primary_color_unparsable(client):
    response = client.put("/api/v1/config/primary-color", json={"value": "purple-ish"})
    body = response.json()

    assert response.status_code == 200
    assert body["changed"] is False
    assert body["primary_color"] == "#9333EA"


def test_export_snippet(client, services):
    response = client.get("/api/v1/export/snippet")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == to_snippet(services.config_store.current())
    assert response.text.startswith("<SmartWalletAuth")


def test_export_document(client, services):
    client.patch("/api/v1/config", json={"theme": "light"})

    response = client.get("/api/v1/export/document")

    assert response.headers["content-type"].startswith("application/json")
    assert response.text == to_document(services.config_store.current())
    assert response.json()["theme"] == "light"


def test_parse_color(client):
    response = client.post("/api/v1/colors/parse", json={"text": "rgb(147, 51, 234)"})
    body = response.json()

    assert body["recognized"] is True
    assert body["notation"] == "RGB"
    assert body["preset"] == "purple"
    assert body["representations"]["hsl"] == "hsl(271, 81%, 56%)"


def test_parse_unrecognized_color(client):
    response = client.post("/api/v1/colors/parse", json={"text": "bogus"})

    assert response.status_code == 200
    assert response.json() == {
        "recognized": False,
        "notation": "UNRECOGNIZED",
        "representations": None,
        "preset": None,
    }


def test_presets(client):
    body = client.get("/api/v1/colors/presets").json()

    assert body["count"] == 12
    assert [p["name"] for p in body["presets"] if p["active"]] == ["purple"]


def test_service_unavailable_without_session():
    set_service_container(None)
    client = TestClient(create_app())

    response = client.get("/api/v1/config")

    assert response.status_code == 503


def test_recent_events(client):
    client.patch("/api/v1/config", json={"sms": True})
    client.post("/api/v1/config/reorder", json={"sourceId": "sms", "targetId": "passkey"})

    body = client.get("/api/v1/system/events", params={"limit": 5}).json()

    assert [e["type"] for e in body["events"]] == [
        "CONFIG_UPDATED",
        "CONFIG_UPDATED",
        "COMPONENT_ORDER_CHANGED",
    ]
    assert body["events"][0]["source"] == "API"
    assert "changed_fields" in body["events"][0]["fields"]


def test_reset_session(client, services):
    client.patch("/api/v1/config", json={"theme": "light", "primaryColor": "#EF4444"})

    body = client.post("/api/v1/system/reset").json()

    assert body["theme"] == "dark"
    assert body["primaryColor"] == "#9333EA"
    assert services.config_store.current() == services.config_manager.default_widget_config()
