"""The /api/v1 surface, authenticated by API key only."""
import pytest

from conftest import login
from models.api_key import ApiKey
from models.user import User

ALL = ["view", "translate", "review", "manage_translations", "manage_languages",
       "manage_users"]


@pytest.fixture
def token(admin, make_api_key):
    return make_api_key(admin, ALL, name="full")


def headers(token):
    return {"X-API-Key": token}


def test_missing_key(client):
    response = client.get("/api/v1/keys")
    assert response.status_code == 401
    body = response.get_json()
    assert body["error"] == "API key required"
    assert "X-API-Key" in body["message"]


def test_invalid_key(client):
    response = client.get("/api/v1/keys", headers=headers("tk_nope"))
    assert response.status_code == 401
    assert response.get_json()["error"] == "Invalid API key"


def test_session_cookie_is_not_an_api_credential(client):
    login(client, "admin", "admin123")
    assert client.get("/api/v1/keys").status_code == 401


def test_key_limited_by_grant_not_owner_role(client, admin, make_api_key):
    view_only = make_api_key(admin, ["view"])
    response = client.post("/api/v1/keys", json={"key": "menu.title"},
                           headers=headers(view_only))
    assert response.status_code == 403
    body = response.get_json()
    assert body["error"] == "Insufficient permissions"
    assert body["code"] == "insufficient_permissions"
    assert body["required"] == ["manage_translations"]
    assert body["granted"] == ["view"]


def test_key_outlives_owner_demotion(app, client, make_user, make_api_key):
    owner = make_user("vic", role="viewer")
    token = make_api_key(owner, ["view", "manage_translations"])
    response = client.post("/api/v1/keys", json={"key": "from.viewer"},
                           headers=headers(token))
    assert response.status_code == 201

    with app.app_context():
        User.update(owner.id, role="translator")
    response = client.post("/api/v1/keys", json={"key": "still.works"},
                           headers=headers(token))
    assert response.status_code == 201


def test_query_parameter_accepted(client, token):
    response = client.get(f"/api/v1/languages?api_key={token}")
    assert response.status_code == 200
    codes = [lang["code"] for lang in response.get_json()["languages"]]
    assert codes == ["en", "de", "es", "fr"]


def test_header_wins_over_query_parameter(client, token):
    response = client.get("/api/v1/languages?api_key=tk_bad", headers=headers(token))
    assert response.status_code == 200


def test_denied_request_leaves_last_used(app, client, admin, make_api_key):
    view_only = make_api_key(admin, ["view"])
    client.delete("/api/v1/keys/1", headers=headers(view_only))
    with app.app_context():
        assert ApiKey.find_by_token(view_only).last_used is None

    client.get("/api/v1/keys", headers=headers(view_only))
    with app.app_context():
        assert ApiKey.find_by_token(view_only).last_used is not None


def test_translation_round_trip(client, token):
    created = client.post("/api/v1/keys", json={"key": "greeting.hello",
                                                "description": "Greeting"},
                          headers=headers(token))
    assert created.status_code == 201
    key_id = created.get_json()["id"]

    response = client.put(f"/api/v1/translations/{key_id}/de", json={"value": "Hallo"},
                          headers=headers(token))
    assert response.status_code == 200
    assert response.get_json()["status"] == "pending"

    response = client.post(f"/api/v1/translations/{key_id}/de/approve",
                           headers=headers(token))
    assert response.get_json()["status"] == "approved"
    again = client.post(f"/api/v1/translations/{key_id}/de/approve",
                        headers=headers(token))
    assert again.status_code == 409

    flat = client.get("/api/v1/translations/de", headers=headers(token)).get_json()
    assert flat == {"language": "de", "translations": {"greeting.hello": "Hallo"}}

    nested = client.get("/api/v1/keys", headers=headers(token)).get_json()
    assert nested["keys"] == [{
        "id": key_id,
        "key": "greeting.hello",
        "description": "Greeting",
        "context": None,
        "translations": {"de": {"value": "Hallo", "status": "approved"}},
    }]
    assert "id" not in nested["languages"][0]


def test_edit_after_approval_goes_back_to_pending(client, token):
    key_id = client.post("/api/v1/keys", json={"key": "k"},
                         headers=headers(token)).get_json()["id"]
    client.put(f"/api/v1/translations/{key_id}/fr", json={"value": "un"},
               headers=headers(token))
    client.post(f"/api/v1/translations/{key_id}/fr/approve", headers=headers(token))
    response = client.put(f"/api/v1/translations/{key_id}/fr", json={"value": "deux"},
                          headers=headers(token))
    assert response.get_json()["status"] == "pending"


def test_translation_errors(client, token):
    response = client.put("/api/v1/translations/999/de", json={"value": "x"},
                          headers=headers(token))
    assert response.status_code == 404
    assert response.get_json()["code"] == "key_not_found"

    key_id = client.post("/api/v1/keys", json={"key": "k"},
                         headers=headers(token)).get_json()["id"]
    response = client.put(f"/api/v1/translations/{key_id}/de", json={},
                          headers=headers(token))
    assert response.status_code == 400
    assert response.get_json()["code"] == "value_required"

    response = client.post(f"/api/v1/translations/{key_id}/xx/approve",
                           headers=headers(token))
    assert response.status_code == 404

    assert client.get("/api/v1/translations/xx", headers=headers(token)).status_code == 404


def test_create_key_conflict_and_delete(client, token):
    first = client.post("/api/v1/keys", json={"key": "dup"}, headers=headers(token))
    second = client.post("/api/v1/keys", json={"key": "dup"}, headers=headers(token))
    assert second.status_code == 409
    assert second.get_json()["code"] == "key_exists"

    key_id = first.get_json()["id"]
    assert client.delete(f"/api/v1/keys/{key_id}", headers=headers(token)).status_code == 200
    assert client.delete(f"/api/v1/keys/{key_id}", headers=headers(token)).status_code == 404


def test_language_crud(client, token):
    response = client.post("/api/v1/languages",
                           json={"code": "it", "name": "Italiano",
                                 "minecraft_head": "MHF_Italy"},
                           headers=headers(token))
    assert response.status_code == 201
    assert response.get_json()["code"] == "it"

    response = client.put("/api/v1/languages/it", json={"name": "Italian"},
                          headers=headers(token))
    assert response.get_json()["name"] == "Italian"

    body = client.get("/api/v1/languages/it", headers=headers(token)).get_json()
    assert body["name"] == "Italian"
    assert body["is_source"] is False

    assert client.delete("/api/v1/languages/it", headers=headers(token)).status_code == 200
    assert client.get("/api/v1/languages/it", headers=headers(token)).status_code == 404


def test_language_mutation_needs_manage_languages(client, admin, make_api_key):
    token = make_api_key(admin, ["view", "manage_translations"])
    response = client.post("/api/v1/languages", json={"code": "it", "name": "Italiano"},
                           headers=headers(token))
    assert response.status_code == 403
    assert response.get_json()["required"] == ["manage_languages"]


def test_me(client, admin, make_api_key):
    token = make_api_key(admin, ["view"], name="reader")
    body = client.get("/api/v1/me", headers=headers(token)).get_json()
    assert body["name"] == "reader"
    assert body["owner"] == "admin"
    assert body["permissions"] == ["view"]
    assert body["last_used"] is not None


@pytest.mark.parametrize("payload", [{"key": 123}, {"key": ["a"]}, ["a"], "menu.title",
                                     {"key": "ok", "description": {"x": 1}}])
def test_create_key_rejects_non_text_input(client, token, payload):
    response = client.post("/api/v1/keys", json=payload, headers=headers(token))
    assert response.status_code == 400
    assert response.get_json()["code"] in ("key_required", "invalid_request")


def test_translation_value_must_be_text(client, token):
    key_id = client.post("/api/v1/keys", json={"key": "k"},
                         headers=headers(token)).get_json()["id"]
    for payload in ({"value": {"x": 1}}, {"value": 42}, ["Hallo"]):
        response = client.put(f"/api/v1/translations/{key_id}/de", json=payload,
                              headers=headers(token))
        assert response.status_code == 400
        assert response.get_json()["code"] == "value_required"


def test_language_fields_must_be_text(client, token):
    response = client.post("/api/v1/languages", json={"code": 7, "name": "Seven"},
                           headers=headers(token))
    assert response.get_json()["code"] == "language_fields_required"
    response = client.post("/api/v1/languages",
                           json={"code": "it", "name": "Italiano", "minecraft_head": [1]},
                           headers=headers(token))
    assert response.status_code == 400

    response = client.put("/api/v1/languages/de", json={"name": {"en": "German"}},
                          headers=headers(token))
    assert response.status_code == 400
    assert response.get_json()["code"] == "name_required"
