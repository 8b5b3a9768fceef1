"""Tests for the HTTP surface of the mouse relay."""

from __future__ import annotations

from unittest.mock import MagicMock, call

import pytest
from starlette.testclient import TestClient

from mouse_relay.actions.backend import InputInjector
from mouse_relay.actions.executor import MouseActionExecutor
from mouse_relay.interfaces.actions import MouseButton
from mouse_relay.server.app import create_app


@pytest.fixture
def injector() -> MagicMock:
    injector = MagicMock(spec=InputInjector)
    injector.name = "mock"
    return injector


@pytest.fixture
def client(injector: MagicMock) -> TestClient:
    app = create_app(MouseActionExecutor(injector=injector))
    return TestClient(app)


class TestMouseActionsEndpoint:
    """POST /mouse-actions."""

    def test_executes_batch_and_returns_messages(self, client, injector) -> None:
        body = {
            "actions": [
                {"MouseMove": [100.7, 200.2]},
                {"MouseDown": "Left"},
                {"MouseUp": "Left"},
            ]
        }

        response = client.post("/mouse-actions", json=body)

        assert response.status_code == 200
        assert response.json() == {
            "messages": [
                "Mouse move to (100, 200)",
                "Mouse down button: Left",
                "Mouse up button: Left",
            ]
        }
        assert injector.mock_calls == [
            call.mouse_move(100, 200),
            call.mouse_down(MouseButton.LEFT),
            call.mouse_up(MouseButton.LEFT),
        ]

    def test_delay_between_is_accepted(self, client) -> None:
        body = {"actions": [{"MouseDown": "Right"}, {"MouseUp": "Right"}], "delay_between": 10}

        response = client.post("/mouse-actions", json=body)

        assert response.status_code == 200
        assert len(response.json()["messages"]) == 2

    def test_missing_actions_is_bad_request(self, client, injector) -> None:
        """A decode failure is a 400 and injects nothing."""
        response = client.post("/mouse-actions", json={"delay_between": 10})

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text.startswith("Bad request:")
        assert injector.mock_calls == []

    def test_malformed_json_is_bad_request(self, client, injector) -> None:
        response = client.post(
            "/mouse-actions",
            content=b'{"actions": [',
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert injector.mock_calls == []

    def test_unknown_button_is_bad_request(self, client, injector) -> None:
        response = client.post("/mouse-actions", json={"actions": [{"MouseDown": "Thumb"}]})

        assert response.status_code == 400
        assert injector.mock_calls == []

    @pytest.mark.parametrize(
        "body",
        [
            {"actions": [{"MouseMove": ["100", "200"]}]},
            {"actions": [{"MouseMove": [True, False]}]},
            {"actions": [{"MouseDown": "Left"}], "delay_between": "50"},
            {"actions": [{"MouseDown": "Left"}], "delay_between": True},
        ],
    )
    def test_wrong_types_are_rejected_without_input(self, client, injector, body) -> None:
        """Wrongly typed values are a 400, never coerced into cursor input."""
        response = client.post("/mouse-actions", json=body)

        assert response.status_code == 400
        assert injector.mock_calls == []

    def test_single_action_wrong_type_is_rejected(self, client, injector) -> None:
        response = client.post("/mouse-action", json={"action": {"MouseMove": ["1", "2"]}})

        assert response.status_code == 400
        assert injector.mock_calls == []

    def test_injection_failure_returns_all_messages(self, client, injector) -> None:
        injector.mouse_up.side_effect = OSError("device busy")
        body = {"actions": [{"MouseUp": "Left"}, {"MouseMove": [1, 2]}]}

        response = client.post("/mouse-actions", json=body)

        assert response.status_code == 500
        assert response.json() == {
            "error": "Input injection failed",
            "messages": ["Mouse up failed: Left (device busy)", "Mouse move to (1, 2)"],
        }

    def test_get_is_not_allowed(self, client) -> None:
        response = client.get("/mouse-actions")

        assert response.status_code == 405


class TestMouseActionEndpoint:
    """POST /mouse-action."""

    def test_executes_single_action(self, client, injector) -> None:
        response = client.post("/mouse-action", json={"action": {"MouseDown": "ScrollUp"}})

        assert response.status_code == 200
        assert response.json() == {"message": "Mouse down button: ScrollUp"}
        injector.mouse_down.assert_called_once_with(MouseButton.SCROLL_UP)

    def test_bad_body(self, client, injector) -> None:
        response = client.post("/mouse-action", json={"MouseDown": "Left"})

        assert response.status_code == 400
        assert injector.mock_calls == []

    def test_injection_failure(self, client, injector) -> None:
        injector.mouse_move.side_effect = RuntimeError("no display")

        response = client.post("/mouse-action", json={"action": {"MouseMove": [3.5, 4.5]}})

        assert response.status_code == 500
        assert response.json()["message"] == "Mouse move failed: (3, 4) (no display)"


class TestRouting:
    def test_unknown_path_is_not_found(self, client) -> None:
        response = client.post("/mouse-click", json={})

        assert response.status_code == 404
        assert response.text == "Not found"

    def test_health(self, client) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "injector": "mock"}

    def test_default_app_uses_null_injector(self) -> None:
        with TestClient(create_app()) as client:
            response = client.get("/health")

        assert response.json()["injector"] == "null"

    def test_unexpected_error_is_plain_500(self) -> None:
        executor = MagicMock(spec=MouseActionExecutor)
        executor.execute.side_effect = KeyError("bug")
        app = create_app(executor)

        client = TestClient(app, raise_server_exceptions=False)
        response = client.post("/mouse-actions", json={"actions": []})

        assert response.status_code == 500
        assert response.text == "Internal server error"
