"""
API tests for /api/v1/translations
"""
import json

import pytest

BASE = "/api/v1/translations"


@pytest.fixture
def create(client, auth_headers):
    def _create(**overrides):
        payload = {"key": "greeting.hello", "content": "Hello", "locale": "en", "tags": ["welcome"]}
        payload.update(overrides)
        response = client.post(BASE, json=payload, headers=auth_headers)
        assert response.status_code == 200, response.text
        return response.json()
    return _create


def test_requires_authentication(client):
    response = client.get(BASE)
    assert response.status_code == 401


def test_rejects_invalid_token(client):
    response = client.get(BASE, headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_create_and_get_by_id(client, auth_headers, create):
    created = create()
    
    assert created["id"]
    assert created["createdAt"] == created["updatedAt"]
    
    response = client.get(f"{BASE}/{created['id']}", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["key"] == "greeting.hello"
    assert data["content"] == "Hello"
    assert data["locale"] == "en"
    assert data["tags"] == ["welcome"]
    assert data["createdAt"] is not None
    assert data["updatedAt"] is not None


def test_create_blank_field_returns_400(client, auth_headers):
    response = client.post(
        BASE,
        json={"key": " ", "content": "Hello", "locale": "en"},
        headers=auth_headers,
    )
    
    assert response.status_code == 400
    data = response.json()
    assert data["error_code"] == "VALIDATION_FAILED"
    assert "key" in data["fields"]


def test_create_malformed_body_returns_400(client, auth_headers):
    response = client.post(BASE, json={"key": "k", "content": "c", "locale": "en", "tags": "nope"}, headers=auth_headers)
    assert response.status_code == 400
    assert "tags" in response.json()["fields"]


def test_update(client, auth_headers, create):
    created = create()
    
    response = client.put(
        f"{BASE}/{created['id']}",
        json={"id": "other", "key": "greeting.hi", "content": "Hi", "locale": "en", "tags": ["casual"]},
        headers=auth_headers,
    )
    
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == created["id"]
    assert data["createdAt"] == created["createdAt"]
    assert data["updatedAt"] >= created["updatedAt"]
    assert data["key"] == "greeting.hi"
    assert data["tags"] == ["casual"]


def test_update_missing_returns_404(client, auth_headers):
    response = client.put(
        f"{BASE}/missing",
        json={"key": "k", "content": "c", "locale": "en"},
        headers=auth_headers,
    )
    
    assert response.status_code == 404
    data = response.json()
    assert data["error_code"] == "NOT_FOUND"
    assert data["status"] == 404


def test_get_missing_returns_404(client, auth_headers):
    response = client.get(f"{BASE}/missing", headers=auth_headers)
    assert response.status_code == 404


def test_list_and_paging(client, auth_headers, create):
    for i in range(3):
        create(key=f"key_{i}")
    
    assert len(client.get(BASE, headers=auth_headers).json()) == 3
    assert len(client.get(BASE, params={"limit": 2}, headers=auth_headers).json()) == 2
    assert len(client.get(BASE, params={"skip": 2}, headers=auth_headers).json()) == 1


def test_searches(client, auth_headers, create):
    create(key="greeting.hello", content="Hello World", locale="en", tags=["welcome"])
    create(key="menu.file", content="Fichier", locale="fr", tags=["menu"])
    create(key="menu.edit", content="Edit", locale="en", tags=["menu", "toolbar"])
    
    def keys(path, **params):
        response = client.get(f"{BASE}{path}", params=params, headers=auth_headers)
        assert response.status_code == 200
        return sorted(item["key"] for item in response.json())
    
    assert keys("/search/key", key="MENU") == ["menu.edit", "menu.file"]
    assert keys("/search/content", content="world") == ["greeting.hello"]
    assert keys("/search/tags", tags="welcome,toolbar") == ["greeting.hello", "menu.edit"]
    assert keys("/search/tags", tags=["welcome", "menu"]) == ["greeting.hello", "menu.edit", "menu.file"]
    assert keys("/locale/fr") == ["menu.file"]
    assert keys("/locale/FR") == []


def test_export_csv(client, auth_headers, create):
    create(content='Hello, "world"')
    
    response = client.get(f"{BASE}/export/csv", headers=auth_headers)
    
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.headers["content-disposition"] == "attachment; filename=translations.csv"
    lines = response.text.split("\n")
    assert lines[0] == "ID,Key,Locale,Content,Tags,Created At,Updated At"
    assert ',"Hello, ""world""",welcome,' in lines[1]


def test_export_json(client, auth_headers, create):
    created = create()
    
    response = client.get(f"{BASE}/export/json", headers=auth_headers)
    
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.headers["content-disposition"] == "attachment; filename=translations.json"
    data = json.loads(response.content)
    assert data == [created]


def test_seed(client, auth_headers):
    response = client.post(f"{BASE}/seed", headers=auth_headers)
    
    assert response.status_code == 200
    assert response.json()["inserted"] == 50
    
    items = client.get(BASE, headers=auth_headers).json()
    assert len(items) == 50
    assert {item["locale"] for item in items} == {"en", "fr"}
