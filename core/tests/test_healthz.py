from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient

from healthcare_portal.app import create_app


def test_healthz_ok(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HEALTHCARE_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


def test_info_reports_handler_metadata(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HEALTHCARE_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        body = client.get("/info").json()
        assert body["ok"] is True
        assert "Healthcare" in body["data"]["metadata"]
        assert body["data"]["name"] == "Healthcare Portal Core"


def test_unknown_route_uses_error_envelope(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HEALTHCARE_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        r = client.get("/patients")
        assert r.status_code == 404
        assert r.json()["ok"] is False
        assert r.json()["error"]["code"] == "not_found"


def test_post_to_dashboard_is_not_allowed(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HEALTHCARE_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        r = client.post("/")
        assert r.status_code == 405
        assert r.json()["error"]["code"] == "method_not_allowed"


def test_startup_records_resolved_paths(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HEALTHCARE_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        client.get("/healthz")
        assert client.app.state.healthcare_paths.logs_dir == tmp_path.resolve() / "logs"
