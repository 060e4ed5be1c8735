from __future__ import annotations

import json
from pathlib import Path

from fastapi.testclient import TestClient

from healthcare_portal.app import create_app
from healthcare_portal.page import DASHBOARD_BYTES, DASHBOARD_HTML, PAGE_TITLE


def test_dashboard_served_with_fixed_content_type(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HEALTHCARE_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        r = client.get("/")
        assert r.status_code == 200
        assert r.headers["content-type"] == "text/html; charset=UTF-8"
        assert r.headers["content-length"] == str(len(DASHBOARD_BYTES))
        assert "<title>Healthcare Management System</title>" in r.text
        assert r.content == DASHBOARD_BYTES


def test_query_parameters_and_headers_are_ignored(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HEALTHCARE_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        plain = client.get("/")
        noisy = client.get(
            "/",
            params={"foo": "bar", "patient": "42"},
            headers={"Accept": "application/json", "Accept-Language": "de"},
        )
        assert noisy.status_code == 200
        assert noisy.content == plain.content
        assert noisy.headers["content-type"] == plain.headers["content-type"]


def test_repeated_requests_are_identical(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HEALTHCARE_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        bodies = {client.get("/").content for _ in range(5)}
        assert bodies == {DASHBOARD_BYTES}


def test_dashboard_route_comes_from_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HEALTHCARE_HOME", str(tmp_path))
    config_dir = tmp_path / "config"
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "core.json").write_text(
        json.dumps({"page": {"route": "/dashboard"}}),
        encoding="utf-8",
    )

    with TestClient(create_app()) as client:
        assert client.get("/dashboard").content == DASHBOARD_BYTES
        assert client.get("/").status_code == 404


def test_document_structure() -> None:
    assert DASHBOARD_HTML.startswith("<!DOCTYPE html>\n<html>\n<head>\n")
    assert DASHBOARD_HTML.endswith("</body>\n</html>\n")
    assert f"<title>{PAGE_TITLE}</title>" in DASHBOARD_HTML
    assert DASHBOARD_HTML.count("<div class='feature-card'>") == 6
    for title in (
        "Patient Registration",
        "Appointment Scheduling",
        "Medical History",
        "Prescription Management",
        "Report Generation",
        "Security & Privacy",
    ):
        assert f"<div class='feature-title'>{title}</div>" in DASHBOARD_HTML
    assert "Pipeline Status: ✅ All stages passed" in DASHBOARD_HTML
    assert "<p>© 2025 Healthcare Management System</p>" in DASHBOARD_HTML
