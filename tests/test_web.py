"""
Unit tests for the web application components.

Tests the SessionService, the session endpoints and the entry page.
"""

import uuid
from urllib.parse import unquote

import pytest
from fastapi.responses import Response
from fastapi.testclient import TestClient

from gameplatform.config import Settings
from gameplatform.web.app import create_app
from gameplatform.web.models import CreatePlayerResponse, UpdateNameRequest
from gameplatform.web.session import (
    SessionService, SessionValidationError,
    is_valid_player_uuid, is_valid_player_name
)
from gameplatform.utils.constants import (
    PLAYER_UUID_COOKIE, PLAYER_NAME_COOKIE, COOKIE_MAX_AGE, UUID_V4_PATTERN,
    INVALID_UUID_ERROR, NAME_REQUIRED_ERROR
)


def set_cookie_headers(headers, name):
    """Return the Set-Cookie headers for one cookie name, lowercased."""
    return [
        header.lower() for header in headers
        if header.startswith(f"{name}=")
    ]


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a temporary web directory."""
    settings = Settings()
    settings.web_dir = str(tmp_path)
    settings.cookie_secure = False
    return settings


@pytest.fixture
def client(settings):
    """Test client for a fresh app."""
    return TestClient(create_app(settings))


class TestValidation:
    """Tests for identifier and name checks."""

    def test_uuid4_is_valid(self):
        assert is_valid_player_uuid(str(uuid.uuid4())) is True

    def test_uppercase_uuid4_is_valid(self):
        """The shape check is case-insensitive."""
        assert is_valid_player_uuid(str(uuid.uuid4()).upper()) is True

    @pytest.mark.parametrize("value", [
        None,
        "",
        "not-a-uuid",
        str(uuid.uuid1()),
        "12345678-1234-4234-c234-123456789012",
        str(uuid.uuid4()) + "0",
        " " + str(uuid.uuid4()),
    ])
    def test_malformed_uuid_is_invalid(self, value):
        assert is_valid_player_uuid(value) is False

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n", 5])
    def test_blank_name_is_invalid(self, value):
        assert is_valid_player_name(value) is False

    def test_name_is_valid(self):
        assert is_valid_player_name(" Alex ") is True


class TestSessionService:
    """Tests for SessionService class."""

    @pytest.fixture
    def service(self):
        return SessionService()

    def test_create_player_sets_cookie(self, service):
        """Creating a player should set the identifier cookie."""
        response = Response()
        player_uuid = service.create_player(response)

        assert UUID_V4_PATTERN.match(player_uuid)
        headers = set_cookie_headers(response.headers.getlist("set-cookie"), PLAYER_UUID_COOKIE)
        assert len(headers) == 1
        assert player_uuid.lower() in headers[0]

    def test_update_rejects_bad_uuid(self, service):
        """Malformed identifiers should be rejected before the name."""
        with pytest.raises(SessionValidationError) as excinfo:
            service.update_player_name(Response(), "bogus", "")
        assert excinfo.value.message == INVALID_UUID_ERROR

    def test_update_rejects_blank_name(self, service):
        with pytest.raises(SessionValidationError) as excinfo:
            service.update_player_name(Response(), str(uuid.uuid4()), "  ")
        assert excinfo.value.message == NAME_REQUIRED_ERROR

    def test_update_sets_name_cookie(self, service):
        response = Response()
        service.update_player_name(response, str(uuid.uuid4()), "Alex")

        headers = set_cookie_headers(response.headers.getlist("set-cookie"), PLAYER_NAME_COOKIE)
        assert len(headers) == 1
        assert headers[0].startswith("playername=alex")

    def test_name_cookie_is_percent_encoded(self, service):
        """Cookie values are URL-encoded so any name fits in the header."""
        response = Response()
        service.update_player_name(response, str(uuid.uuid4()), "Zo\u00eb Smith;")

        headers = response.headers.getlist("set-cookie")
        assert headers[0].startswith("playerName=Zo%C3%AB%20Smith%3B;")

    def test_secure_flag(self):
        """Secure cookies should carry the Secure attribute."""
        response = Response()
        SessionService(cookie_secure=True).create_player(response)
        assert "secure" in set_cookie_headers(response.headers.getlist("set-cookie"), PLAYER_UUID_COOKIE)[0]

    def test_clear_session_expires_both(self, service):
        response = Response()
        service.clear_session(response)

        for name in (PLAYER_UUID_COOKIE, PLAYER_NAME_COOKIE):
            headers = set_cookie_headers(response.headers.getlist("set-cookie"), name)
            assert len(headers) == 1
            assert "max-age=0" in headers[0]


class TestModels:
    """Tests for API models."""

    def test_create_player_response_alias(self):
        """Responses should serialize with the camelCase key."""
        model = CreatePlayerResponse(player_uuid="abc")
        assert model.model_dump(by_alias=True) == {"playerUUID": "abc"}

    def test_update_name_request_alias(self):
        model = UpdateNameRequest.model_validate({"playerName": "Alex"})
        assert model.player_name == "Alex"

    def test_update_name_request_missing_name(self):
        model = UpdateNameRequest.model_validate({})
        assert model.player_name is None


class TestCreatePlayer:
    """Tests for POST /api/player."""

    def test_returns_identifier(self, client):
        response = client.post("/api/player")

        assert response.status_code == 200
        data = response.json()
        assert set(data.keys()) == {"playerUUID"}
        assert UUID_V4_PATTERN.match(data["playerUUID"])

    def test_sets_cookie_with_flags(self, client):
        """Cookie should be HttpOnly, SameSite=Strict, 24h, root path."""
        response = client.post("/api/player")
        player_uuid = response.json()["playerUUID"]

        headers = set_cookie_headers(response.headers.get_list("set-cookie"), PLAYER_UUID_COOKIE)
        assert len(headers) == 1
        header = headers[0]
        assert f"playeruuid={player_uuid}" in header
        assert "httponly" in header
        assert "samesite=strict" in header
        assert f"max-age={COOKIE_MAX_AGE}" in header
        assert "path=/" in header
        assert "secure" not in header

    def test_cookie_reaches_client(self, client):
        response = client.post("/api/player")
        assert client.cookies.get(PLAYER_UUID_COOKIE) == response.json()["playerUUID"]

    def test_identifiers_are_distinct(self, client):
        """Identifiers should not collide across many calls."""
        identifiers = [client.post("/api/player").json()["playerUUID"] for _ in range(200)]
        assert len(set(identifiers)) == len(identifiers)


class TestUpdatePlayerName:
    """Tests for PUT /api/player/{uuid}."""

    @pytest.mark.parametrize("player_uuid", [
        "not-a-uuid",
        str(uuid.uuid1()),
        "00000000-0000-0000-0000-000000000000",
    ])
    def test_bad_uuid(self, client, player_uuid):
        response = client.put(f"/api/player/{player_uuid}", json={"playerName": "Alex"})

        assert response.status_code == 400
        assert response.json() == {"error": INVALID_UUID_ERROR}

    @pytest.mark.parametrize("body", [
        {"playerName": ""},
        {"playerName": "   "},
        {"playerName": "\t\n"},
        {"playerName": None},
        {},
    ])
    def test_blank_name(self, client, body):
        response = client.put(f"/api/player/{uuid.uuid4()}", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": NAME_REQUIRED_ERROR}

    def test_missing_body(self, client):
        response = client.put(f"/api/player/{uuid.uuid4()}")

        assert response.status_code == 400
        assert response.json() == {"error": NAME_REQUIRED_ERROR}

    def test_non_string_name(self, client):
        """Malformed bodies should be a 400 with an error, not a 422."""
        response = client.put(f"/api/player/{uuid.uuid4()}", json={"playerName": 5})

        assert response.status_code == 400
        assert "error" in response.json()

    def test_invalid_json(self, client):
        response = client.put(
            f"/api/player/{uuid.uuid4()}",
            content=b"{not json",
            headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert "error" in response.json()

    def test_valid_name(self, client):
        response = client.put(f"/api/player/{uuid.uuid4()}", json={"playerName": "Alex"})

        assert response.status_code == 200
        assert response.json() == {"success": True}

        headers = set_cookie_headers(response.headers.get_list("set-cookie"), PLAYER_NAME_COOKIE)
        assert len(headers) == 1
        assert headers[0].startswith("playername=alex")
        assert f"max-age={COOKIE_MAX_AGE}" in headers[0]
        assert "httponly" in headers[0]
        assert "samesite=strict" in headers[0]

    @pytest.mark.parametrize("player_name", [
        "\u540d\u524d",
        "Zo\u00eb",
        "Alex Smith",
        " Alex ",
        "a;b",
        'say "hi"',
        "O'Brien",
        "100% sure",
        "a,b=c",
        "\U0001f3b2 roller",
    ])
    def test_any_name_round_trips(self, client, player_name):
        """Every non-blank name is accepted and comes back from the cookie."""
        response = client.put(f"/api/player/{uuid.uuid4()}", json={"playerName": player_name})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert unquote(client.cookies.get(PLAYER_NAME_COOKIE)) == player_name

    def test_unissued_uuid_is_accepted(self, client):
        """Any well-formed identifier is trusted; nothing is looked up."""
        response = client.put(f"/api/player/{uuid.uuid4()}", json={"playerName": "Sam"})
        assert response.status_code == 200

    def test_no_cookie_on_failure(self, client):
        response = client.put("/api/player/bogus", json={"playerName": "Alex"})
        assert response.headers.get_list("set-cookie") == []


class TestClearSession:
    """Tests for DELETE /api/session."""

    def test_clears_both_cookies(self, client):
        player_uuid = client.post("/api/player").json()["playerUUID"]
        client.put(f"/api/player/{player_uuid}", json={"playerName": "Alex"})
        assert client.cookies.get(PLAYER_NAME_COOKIE) == "Alex"

        response = client.delete("/api/session")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.cookies.get(PLAYER_UUID_COOKIE) is None
        assert client.cookies.get(PLAYER_NAME_COOKIE) is None

    def test_idempotent(self, client):
        """Clearing twice should give the same response and end state."""
        client.post("/api/player")

        first = client.delete("/api/session")
        second = client.delete("/api/session")

        assert first.status_code == second.status_code == 200
        assert first.json() == second.json() == {"success": True}
        assert client.cookies.get(PLAYER_UUID_COOKIE) is None
        assert client.cookies.get(PLAYER_NAME_COOKIE) is None

    def test_without_session(self, client):
        response = client.delete("/api/session")
        assert response.status_code == 200
        assert response.json() == {"success": True}


class TestScenario:
    """Full create, name, clear flow."""

    def test_create_name_clear(self, client):
        response = client.post("/api/player")
        assert response.status_code == 200
        player_uuid = response.json()["playerUUID"]

        response = client.put(f"/api/player/{player_uuid}", json={"playerName": "Alex"})
        assert response.status_code == 200
        assert response.json() == {"success": True}

        response = client.delete("/api/session")
        assert response.status_code == 200
        assert response.json() == {"success": True}


class TestStaticPages:
    """Tests for the entry page and health check."""

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_missing_frontend(self, client):
        """Without an index page, a JSON hint should be returned."""
        response = client.get("/")
        assert response.status_code == 200
        assert "message" in response.json()

    def test_any_path_serves_index(self, settings, tmp_path):
        (tmp_path / "index.html").write_text("<div id=\"root\"></div>")
        client = TestClient(create_app(settings))

        for path in ("/", "/lobby", "/some/deep/path"):
            response = client.get(path)
            assert response.status_code == 200
            assert "id=\"root\"" in response.text

    def test_static_assets(self, settings, tmp_path):
        (tmp_path / "index.html").write_text("<html></html>")
        (tmp_path / "app.js").write_text("console.log('hi');")
        client = TestClient(create_app(settings))

        response = client.get("/static/app.js")
        assert response.status_code == 200
        assert "console.log" in response.text
