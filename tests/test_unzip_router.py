from fastapi.testclient import TestClient

from app.app import app
from routers import unzip as unzip_router
from schemas.unzip import TaskStatus

PAYLOAD = {
    "SourceBlobUrl": "https://src.blob.core.windows.net",
    "DestinationBlobUrl": "https://dst.blob.core.windows.net",
    "SourceContainerName": "archives",
    "DestinationContainerName": "unzipped",
    "SourceBlobName": "in/batch.zip",
    "DestinationFolderName": "drop",
    "TopicName": "files",
    "CorrelationId": "corr-1",
    "IntId": "INT001",
    "EventType": "FileArrived",
    "ZipFileName": "batch.zip",
}


def test_health():
    client = TestClient(app)
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_unzip_blob_returns_status_even_on_error(monkeypatch):
    seen = {}

    async def fake_run(request, settings):
        seen["request"] = request
        return TaskStatus(current_task_status="Error: Source blob 'in/batch.zip' not found.")

    monkeypatch.setattr(unzip_router, "run_file_unzip", fake_run)
    client = TestClient(app)
    resp = client.post("/api/unzip/blob", json=PAYLOAD)

    assert resp.status_code == 200
    assert resp.json() == {"CurrentTaskStatus": "Error: Source blob 'in/batch.zip' not found."}
    assert seen["request"].destination_folder_name == "drop"


def test_unzip_blob_rejects_missing_fields():
    client = TestClient(app)
    payload = dict(PAYLOAD)
    del payload["TopicName"]
    resp = client.post("/api/unzip/blob", json=payload)
    assert resp.status_code == 422
