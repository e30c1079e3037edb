import io
import zipfile

import pytest
from fastapi.testclient import TestClient

from src.main import app
from src.routes import generate as generate_route
from src.services.generate_service import EmptyResultError, EngineFaultError


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["service"] == "scriptforge-api"


def test_options(client):
    data = client.get("/api/options/").json()["data"]
    assert "Auto" in data["languages"]
    assert data["safety_levels"] == ["Dry Run Only", "Normal (Recommended)", "Production (Strict)"]
    assert data["defaults"]["language"] == "Python"
    assert data["defaults"]["include_tests"] is True


def test_generate_success(client, monkeypatch, sample_result):
    seen = {}

    async def fake_generate(req):
        seen["request"] = req
        return sample_result

    monkeypatch.setattr(generate_route, "generate_script", fake_generate)

    response = client.post("/api/generate/", json={"description": "Back up /data", "language": "Go"})

    body = response.json()
    assert body["success"] is True
    assert body["data"]["script"] == 'print("backup")'
    assert body["data"]["metrics"]["time_saved_minutes"] == 90
    assert seen["request"].language.value == "Go"


@pytest.mark.parametrize(
    "error, code",
    [
        (EngineFaultError("engine down"), "ENGINE_FAULT"),
        (EmptyResultError("nothing"), "EMPTY_RESULT"),
    ],
)
def test_generate_faults(client, monkeypatch, error, code):
    async def fake_generate(req):
        raise error

    monkeypatch.setattr(generate_route, "generate_script", fake_generate)

    body = client.post("/api/generate/", json={"description": "Back up /data"}).json()
    assert body["success"] is False
    assert body["error"] == code
    assert body["message"] == error.message


def test_generate_rejects_blank_description(client):
    response = client.post("/api/generate/", json={"description": "   "})
    assert response.status_code == 422


def test_parse(client, canonical_response):
    body = client.post("/api/generate/parse", json={"text": canonical_response}).json()
    assert body["success"] is True
    assert len(body["data"]["failure_simulations"]) == 3
    assert body["data"]["assumptions"][0] == "AWS credentials are available in the environment"


def test_parse_whitespace_only(client):
    body = client.post("/api/generate/parse", json={"text": "  \n "}).json()
    assert body["success"] is False
    assert body["error"] == "EMPTY_RESULT"


def test_export_archive(client, sample_result):
    response = client.post(
        "/api/export/archive",
        json={"result": sample_result.model_dump(), "language": "Bash", "script_type": "DevOps"},
    )

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/zip"
    assert "engineering-package.zip" in response.headers["content-disposition"]
    with zipfile.ZipFile(io.BytesIO(response.content)) as archive:
        assert "script.sh" in archive.namelist()
        assert archive.read("README.md").decode().startswith("# DevOps Script")


def test_export_file(client, sample_result):
    response = client.post("/api/export/file/dockerfile", json={"result": sample_result.model_dump()})
    assert response.status_code == 200
    assert response.text == "FROM python:3.12-slim"
    assert 'filename="Dockerfile"' in response.headers["content-disposition"]


def test_export_unknown_section(client, sample_result):
    response = client.post("/api/export/file/summary", json={"result": sample_result.model_dump()})
    assert response.status_code == 404


def test_export_gist(client, sample_result):
    body = client.post(
        "/api/export/gist",
        json={"result": sample_result.model_dump(), "description": "Back up /data", "language": "Python"},
    ).json()
    assert body["success"] is True
    assert body["data"]["description"] == "Engineered Script: Back up /data..."
    assert "script.py" in body["data"]["files"]
