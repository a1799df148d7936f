import pytest
from fastapi.testclient import TestClient

from spanish_lottery.api.deps import get_provider
from spanish_lottery.main import app
from spanish_lottery.services import generator_service


@pytest.fixture
def client(fallback_provider):
    app.dependency_overrides[get_provider] = lambda: fallback_provider
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_list_games(client):
    resp = client.get("/api/v1/games")
    assert resp.status_code == 200
    games = {g["game_id"]: g for g in resp.json()}
    assert set(games) == {"primitiva", "bonoloto", "euromillones", "gordo", "eurodreams"}
    assert games["euromillones"]["stars"]["count"] == 2
    assert games["gordo"]["extra"]["name"] == "Número Clave"


def test_unknown_game_is_400(client):
    assert client.get("/api/v1/games/quiniela").status_code == 400
    assert client.post("/api/v1/generator/quiniela").status_code == 400
    assert client.get("/api/v1/stats/quiniela/frequency").status_code == 400


@pytest.mark.parametrize("game_type", ["primitiva", "euromillones", "gordo"])
def test_generate_ticket(client, game_type):
    resp = client.post(f"/api/v1/generator/{game_type}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["historical_patterns"] == 2
    assert body["status"] == "ok"
    assert body["pattern"] is not None

    numbers = body["numbers"]
    assert len(numbers) == (5 if game_type in ("euromillones", "gordo") else 6)
    assert numbers == sorted(numbers)
    check = client.post(
        f"/api/v1/generator/{game_type}/validate",
        json={"numbers": numbers, "strict": True},
    )
    assert check.json() == {"is_valid": True, "errors": []}

    if game_type == "euromillones":
        assert len(body["stars"]) == 2
        assert body["stars"] == sorted(body["stars"])
        assert body["extra"] == []
    else:
        assert len(body["extra"]) == 1


def test_generate_exhausted(client, monkeypatch):
    monkeypatch.setattr(generator_service, "generate_optimized_numbers", lambda *a, **kw: [])
    body = client.post("/api/v1/generator/primitiva").json()
    assert body["status"] == "exhausted"
    assert body["numbers"] == []
    assert body["pattern"] is None
    assert body["message"]


def test_validate_reports_errors_verbatim(client):
    resp = client.post("/api/v1/generator/primitiva/validate", json={"numbers": [5, 5, 6, 7, 8, 9]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["is_valid"] is False
    assert "No se permiten números duplicados" in body["errors"]


def test_analyze(client):
    resp = client.post("/api/v1/generator/analyze", json={"numbers": [2, 11, 20, 27, 37, 44]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["even_count"] == 3
    assert body["sum_range"] == 141


def test_analyze_empty_is_422(client):
    resp = client.post("/api/v1/generator/analyze", json={"numbers": []})
    assert resp.status_code == 422


def test_frequency_top_n(client):
    resp = client.get("/api/v1/stats/primitiva/frequency", params={"top_n": 5})
    assert resp.status_code == 200
    records = resp.json()
    assert len(records) == 5
    assert records[0] == {"number": 2, "frequency": 2, "last_drawn": "2024-02-24"}


def test_history_and_patterns(client):
    history = client.get("/api/v1/stats/bonoloto/history", params={"limit": 1}).json()
    assert history == [{"numbers": [6, 11, 15, 25, 35, 49], "date": "2024-02-26",
                        "extra": None, "stars": None}]

    patterns = client.get("/api/v1/stats/bonoloto/patterns").json()
    assert patterns["total_draws"] == 2
    assert len(patterns["patterns"]) == 2


def test_scraper_refresh_and_status(client):
    status = client.get("/api/v1/scraper/status").json()
    assert status["scheduler"]["running"] is False
    assert status["scheduler"]["jobs"] == []

    refreshed = client.post("/api/v1/scraper/refresh").json()
    assert refreshed["cache"]["loaded"] is True
    assert refreshed["cache"]["games"]["primitiva"] == {"source": "fallback", "draws": 2}
