from fastapi.testclient import TestClient

from brackets.config import config
from brackets.main import app

client = TestClient(app)

def test_post_balanced():
    response = client.post("/balance", json={"expression": "(a[b]{c})"})
    assert response.status_code == 200
    assert response.json() == {"expression": "(a[b]{c})", "balanced": True}

def test_post_unbalanced():
    response = client.post("/balance", json={"expression": "([)]"})
    assert response.status_code == 200
    assert response.json()["balanced"] is False

def test_post_empty_expression():
    response = client.post("/balance", json={"expression": ""})
    assert response.status_code == 200
    assert response.json()["balanced"] is True

def test_post_missing_expression():
    response = client.post("/balance", json={})
    assert response.status_code == 422

def test_post_too_long_expression():
    response = client.post(
        "/balance", json={"expression": "(" * (config.MAX_EXPRESSION_LENGTH + 1)}
    )
    assert response.status_code == 422

def test_get_balance():
    response = client.get("/balance", params={"expression": "{[]}"})
    assert response.status_code == 200
    assert response.json() == {"expression": "{[]}", "balanced": True}

    response = client.get("/balance", params={"expression": ")"})
    assert response.json()["balanced"] is False

def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}

def test_serve_uses_config_host_and_port(monkeypatch):
    import uvicorn
    from brackets import main

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr(main.config, "HOST", "127.0.0.1")
    monkeypatch.setattr(main.config, "PORT", 9000)

    main.serve()

    assert calls == [(main.app, {"host": "127.0.0.1", "port": 9000})]
