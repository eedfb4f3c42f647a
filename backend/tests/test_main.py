from sharecare.core.config import settings


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["message"] == "ShareCare API"


def test_health(client):
    response = client.get("/health")

    assert response.json() == {"status": "healthy", "service": "ShareCare API"}


def test_scheduler_status_when_not_running(client):
    response = client.get("/scheduler/status")

    assert response.json() == {"status": "not_running", "jobs": []}


def test_scheduler_pause_when_not_running(client, monkeypatch):
    monkeypatch.setattr(settings, "DEBUG", True)
    response = client.post("/scheduler/pause/cleanup_otps")

    assert response.json()["status"] == "error"


def test_scheduler_job_control_hidden_outside_debug(client, monkeypatch):
    monkeypatch.setattr(settings, "DEBUG", False)

    assert client.post("/scheduler/pause/cleanup_otps").status_code == 404
    assert client.post("/scheduler/resume/cleanup_otps").status_code == 404
