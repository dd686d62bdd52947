"""
API tests for registration and login
"""
from datetime import timedelta

from app.core.security import create_access_token


def test_register_and_login(client):
    credentials = {"username": "alice", "password": "pw"}
    
    response = client.post("/auth/register", json=credentials)
    assert response.status_code == 200
    assert response.json()["message"] == "User registered successfully"
    
    response = client.post("/auth/login", json=credentials)
    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["access_token"]
    assert data["expires_in"] > 0


def test_register_duplicate_username(client):
    credentials = {"username": "alice", "password": "pw"}
    client.post("/auth/register", json=credentials)
    
    response = client.post("/auth/register", json=credentials)
    
    assert response.status_code == 400


def test_login_wrong_password(client):
    client.post("/auth/register", json={"username": "alice", "password": "pw"})
    
    response = client.post("/auth/login", json={"username": "alice", "password": "wrong"})
    
    assert response.status_code == 401


def test_login_unknown_user(client):
    response = client.post("/auth/login", json={"username": "nobody", "password": "pw"})
    assert response.status_code == 401


def test_token_for_unknown_user_is_rejected(client):
    token = create_access_token({"sub": "ghost"})
    
    response = client.get("/api/v1/translations", headers={"Authorization": f"Bearer {token}"})
    
    assert response.status_code == 401


def test_expired_token_is_rejected(client):
    client.post("/auth/register", json={"username": "alice", "password": "pw"})
    token = create_access_token({"sub": "alice"}, expires_delta=timedelta(minutes=-1))
    
    response = client.get("/api/v1/translations", headers={"Authorization": f"Bearer {token}"})
    
    assert response.status_code == 401
