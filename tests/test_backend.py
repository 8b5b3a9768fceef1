"""Tests for InputInjector interface and implementations.

These tests verify:
- InputInjector interface is properly defined
- NullInputInjector does nothing
- PynputInputInjector calls the right pynput controller methods
- create_injector resolves configured names

pynput is replaced by a fake module so no real input is produced.
"""

import sys
import types
from unittest.mock import MagicMock

import pytest

from mouse_relay.interfaces.actions import InjectorUnavailableError, MouseButton


@pytest.fixture
def fake_pynput(monkeypatch):
    """Install a fake ``pynput.mouse`` and return its Controller instance."""
    controller = MagicMock(name="Controller()")
    mouse = types.ModuleType("pynput.mouse")
    mouse.Button = types.SimpleNamespace(left="BTN_LEFT", middle="BTN_MIDDLE", right="BTN_RIGHT")
    mouse.Controller = MagicMock(return_value=controller)
    package = types.ModuleType("pynput")
    package.mouse = mouse
    monkeypatch.setitem(sys.modules, "pynput", package)
    monkeypatch.setitem(sys.modules, "pynput.mouse", mouse)
    return controller


class TestInputInjectorInterface:
    """Tests for InputInjector abstract interface."""

    def test_input_injector_is_abstract(self):
        """InputInjector should be abstract and not instantiable."""
        from mouse_relay.actions.backend import InputInjector

        with pytest.raises(TypeError):
            InputInjector()  # type: ignore

    def test_input_injector_has_mouse_methods(self):
        from mouse_relay.actions.backend import InputInjector

        assert hasattr(InputInjector, "mouse_move")
        assert hasattr(InputInjector, "mouse_down")
        assert hasattr(InputInjector, "mouse_up")


class TestNullInputInjector:
    """Tests for NullInputInjector (no-op implementation)."""

    @pytest.fixture
    def injector(self):
        from mouse_relay.actions.backend import NullInputInjector

        return NullInputInjector()

    def test_mouse_move_does_nothing(self, injector):
        injector.mouse_move(100, 200)

    def test_buttons_do_nothing(self, injector):
        for button in MouseButton:
            injector.mouse_down(button)
            injector.mouse_up(button)

    def test_name(self, injector):
        assert injector.name == "null"


class TestPynputInputInjector:
    """Tests for PynputInputInjector."""

    @pytest.fixture
    def injector(self, fake_pynput):
        from mouse_relay.actions.backend import PynputInputInjector

        return PynputInputInjector()

    def test_mouse_move_sets_position(self, injector, fake_pynput):
        injector.mouse_move(100, 200)

        assert fake_pynput.position == (100, 200)

    @pytest.mark.parametrize(
        ("button", "native"),
        [
            (MouseButton.LEFT, "BTN_LEFT"),
            (MouseButton.MIDDLE, "BTN_MIDDLE"),
            (MouseButton.RIGHT, "BTN_RIGHT"),
        ],
    )
    def test_press_and_release_map_buttons(self, injector, fake_pynput, button, native):
        injector.mouse_down(button)
        injector.mouse_up(button)

        fake_pynput.press.assert_called_once_with(native)
        fake_pynput.release.assert_called_once_with(native)

    @pytest.mark.parametrize(
        ("button", "step"),
        [
            (MouseButton.SCROLL_UP, (0, 1)),
            (MouseButton.SCROLL_DOWN, (0, -1)),
            (MouseButton.SCROLL_LEFT, (-1, 0)),
            (MouseButton.SCROLL_RIGHT, (1, 0)),
        ],
    )
    def test_scroll_press_scrolls_one_notch(self, injector, fake_pynput, button, step):
        injector.mouse_down(button)

        fake_pynput.scroll.assert_called_once_with(*step)
        fake_pynput.press.assert_not_called()

    def test_scroll_release_is_noop(self, injector, fake_pynput):
        injector.mouse_up(MouseButton.SCROLL_UP)

        fake_pynput.release.assert_not_called()
        fake_pynput.scroll.assert_not_called()

    def test_uses_given_controller(self, fake_pynput):
        from mouse_relay.actions.backend import PynputInputInjector

        controller = MagicMock()
        injector = PynputInputInjector(controller=controller)
        injector.mouse_down(MouseButton.LEFT)

        controller.press.assert_called_once_with("BTN_LEFT")
        fake_pynput.press.assert_not_called()

    def test_controller_failure_is_unavailable(self, fake_pynput, monkeypatch):
        """A controller that cannot reach the display is reported, not swallowed."""
        from mouse_relay.actions.backend import PynputInputInjector

        sys.modules["pynput.mouse"].Controller.side_effect = RuntimeError("no display")

        with pytest.raises(InjectorUnavailableError, match="no display"):
            PynputInputInjector()


class TestCreateInjector:
    """Tests for create_injector."""

    def test_null(self):
        from mouse_relay.actions.backend import NullInputInjector, create_injector

        assert isinstance(create_injector("null"), NullInputInjector)

    def test_pynput(self, fake_pynput):
        from mouse_relay.actions.backend import PynputInputInjector, create_injector

        assert isinstance(create_injector("pynput"), PynputInputInjector)

    def test_unknown_name_raises(self):
        from mouse_relay.actions.backend import create_injector

        with pytest.raises(ValueError, match="Unknown input backend"):
            create_injector("xdotool")
