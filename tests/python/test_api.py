import pytest
from fastapi.testclient import TestClient

from scores_api.config import Settings, load_settings
from scores_api.errors import TransportError, UpstreamError
from scores_api.main import build_resolver, create_app
from scores_api.resolver import CacheTTLs

from nba_payloads import cdn_scoreboard, header_row, line_row, stats_payload


@pytest.fixture
def resolver(make_resolver):
    return make_resolver()


@pytest.fixture
def client(resolver) -> TestClient:
    app = create_app(settings=Settings(log_to_file=False), resolver=resolver)
    return TestClient(app)


def test_today_scoreboard_is_passed_through_and_cached(client, cdn_client) -> None:
    first = client.get("/api/scoreboard")
    second = client.get("/api/scoreboard")

    assert first.status_code == 200
    assert first.json() == cdn_scoreboard()
    assert second.json() == cdn_scoreboard()
    assert cdn_client.scoreboard_calls == 1


def test_historical_scoreboard(client, stats_client) -> None:
    stats_client.payload = stats_payload(
        [header_row("G1", 3, 11, 22)],
        [line_row("G1", 11, "LAL", "Los Angeles", "Lakers", 100), line_row("G1", 22, "BOS", "Boston", "Celtics", 95)],
    )

    response = client.get("/api/scoreboard", params={"date": "2023-12-25"})

    assert response.status_code == 200
    games = response.json()["scoreboard"]["games"]
    assert len(games) == 1
    assert games[0]["gameId"] == "G1"
    assert games[0]["homeTeam"]["score"] == 100
    assert games[0]["awayTeam"]["score"] == 95
    assert games[0]["period"] == 0
    assert stats_client.calls == ["12/25/2023"]


def test_upstream_error_becomes_500(client, cdn_client) -> None:
    cdn_client.error = UpstreamError("NBA CDN", 503, "Service Unavailable")

    response = client.get("/api/scoreboard")

    assert response.status_code == 500
    assert response.json() == {"error": "NBA CDN Error: 503 Service Unavailable"}


def test_transport_error_becomes_500(client, stats_client) -> None:
    stats_client.error = TransportError("NBA Stats", "https://stats.nba.com/stats/scoreboardv2", "timed out after 10.0s")

    response = client.get("/api/scoreboard?date=2023-12-25")

    assert response.status_code == 500
    assert response.json() == {"error": "NBA Stats request failed: timed out after 10.0s"}


def test_unexpected_error_becomes_500(client, cdn_client) -> None:
    cdn_client.error = KeyError("scoreboard")

    response = client.get("/api/scoreboard")

    assert response.status_code == 500
    assert "error" in response.json()


def test_malformed_date_is_400(client, stats_client) -> None:
    response = client.get("/api/scoreboard?date=December-25")

    assert response.status_code == 400
    assert "December-25" in response.json()["error"]
    assert stats_client.calls == []


def test_boxscore_is_passed_through(client, cdn_client) -> None:
    response = client.get("/api/boxscore/0022300555")

    assert response.status_code == 200
    assert response.json() == cdn_client.boxscore
    assert cdn_client.boxscore_calls == ["0022300555"]


def test_boxscore_error(client, cdn_client) -> None:
    cdn_client.error = UpstreamError("NBA CDN", 403, "Forbidden")

    response = client.get("/api/boxscore/0022300555")

    assert response.status_code == 500
    assert response.json() == {"error": "NBA CDN Error: 403 Forbidden"}


def test_health(client) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "NBA Scores API Proxy is running"}


def test_cors_headers(client) -> None:
    response = client.get("/api/health", headers={"Origin": "http://localhost:5173"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_resolver_lives_on_app_state(resolver) -> None:
    app = create_app(settings=Settings(log_to_file=False), resolver=resolver)

    assert app.state.resolver is resolver


def test_build_resolver_wires_settings() -> None:
    settings = load_settings(
        {
            "SCOREBOARD_TODAY_TTL_SECONDS": "3",
            "SCOREBOARD_HISTORICAL_TTL_SECONDS": "120",
            "BOXSCORE_TTL_SECONDS": "7",
            "UPSTREAM_TIMEOUT_SECONDS": "2",
            "NBA_CDN_BASE_URL": "http://x/",
            "NBA_STATS_BASE_URL": "http://y/stats/",
            "CACHE": "false",
        }
    )

    resolver = build_resolver(settings)

    assert resolver.ttls == CacheTTLs(today=3.0, historical=120.0, boxscore=7.0)
    assert resolver.cache.enabled is False
    assert resolver.cdn_client.base_url == "http://x"
    assert resolver.cdn_client.timeout_seconds == 2.0
    assert resolver.stats_client.base_url == "http://y/stats"
    assert resolver.stats_client.timeout_seconds == 2.0


def test_build_resolver_clients_do_not_share_a_session() -> None:
    resolver = build_resolver(load_settings({}))

    # requests.Session is not thread-safe; handlers run in a thread pool
    assert resolver.cdn_client.session is None
    assert resolver.stats_client.session is None
