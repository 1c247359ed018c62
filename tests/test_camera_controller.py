import numpy as np
import pytest

from razel.camera import ortho
from razel.camera_controller import OrthographicCameraController
from razel.codes import Key
from razel.events import KeyPressedEvent, MouseScrolledEvent, WindowResizeEvent
from razel.input import Input, InputBackend
from razel.timestep import Timestep


class FakeBackend(InputBackend):
    def __init__(self, keys=()):
        self.keys = set(keys)

    def is_key_pressed(self, keycode):
        return keycode in self.keys

    def is_mouse_button_pressed(self, button):
        return False

    def mouse_position(self):
        return (0.0, 0.0)


@pytest.fixture
def backend():
    fake = FakeBackend()
    Input.set_backend(fake)
    yield fake
    Input.set_backend(None)


def expected_projection(aspect, zoom):
    return ortho(-aspect * zoom, aspect * zoom, -zoom, zoom, -1.0, 1.0)


def test_initial_projection():
    ctrl = OrthographicCameraController(1280 / 720)
    assert ctrl.zoom_level == 1.0
    np.testing.assert_allclose(
        ctrl.camera.projection_matrix, expected_projection(1280 / 720, 1.0)
    )


def test_move_right_uses_initial_speed(backend):
    ctrl = OrthographicCameraController(1.0)
    backend.keys = {Key.D, Key.W}
    ctrl.on_update(Timestep(0.1))
    assert ctrl.camera.position[0] == pytest.approx(5.0 * 0.1)
    assert ctrl.camera.position[1] == pytest.approx(5.0 * 0.1)


def test_left_takes_priority_over_right(backend):
    ctrl = OrthographicCameraController(1.0)
    backend.keys = {Key.A, Key.D}
    ctrl.on_update(Timestep(0.2))
    assert ctrl.camera.position[0] == pytest.approx(-5.0 * 0.2)


def test_speed_follows_zoom_after_first_update(backend):
    ctrl = OrthographicCameraController(1.0)
    ctrl.on_event(MouseScrolledEvent(0.0, 2.0))
    zoom = ctrl.zoom_level
    backend.keys = {Key.S}
    ctrl.on_update(Timestep(0.1))
    after_first = ctrl.camera.position[1]
    ctrl.on_update(Timestep(0.1))
    assert after_first == pytest.approx(-5.0 * 0.1)
    assert ctrl.camera.position[1] - after_first == pytest.approx(-zoom * 0.1)


def test_rotation_enabled(backend):
    ctrl = OrthographicCameraController(1.0, rotation=True)
    backend.keys = {Key.Q}
    ctrl.on_update(Timestep(0.5))
    assert ctrl.camera.rotation == pytest.approx(180.0 * 0.5)
    backend.keys = {Key.Q, Key.E}
    ctrl.on_update(Timestep(0.5))
    assert ctrl.camera.rotation == pytest.approx(180.0 * 0.5)


def test_rotation_disabled(backend):
    ctrl = OrthographicCameraController(1.0, rotation=False)
    backend.keys = {Key.Q}
    ctrl.on_update(Timestep(0.5))
    assert ctrl.camera.rotation == 0.0


def test_scroll_zooms_and_updates_projection():
    ctrl = OrthographicCameraController(2.0)
    event = MouseScrolledEvent(0.0, 1.0)
    ctrl.on_event(event)
    assert ctrl.zoom_level == pytest.approx(0.75)
    np.testing.assert_allclose(
        ctrl.camera.projection_matrix, expected_projection(2.0, ctrl.zoom_level)
    )
    assert event.handled is False


def test_scroll_zoom_is_clamped():
    ctrl = OrthographicCameraController(1.0)
    ctrl.on_event(MouseScrolledEvent(0.0, 100.0))
    assert ctrl.zoom_level == 0.25


def test_resize_changes_aspect_ratio():
    ctrl = OrthographicCameraController(1.0)
    event = WindowResizeEvent(800, 400)
    ctrl.on_event(event)
    assert ctrl.aspect_ratio == pytest.approx(800 / 400)
    np.testing.assert_allclose(
        ctrl.camera.projection_matrix, expected_projection(800 / 400, 1.0)
    )
    assert event.handled is False


def test_unrelated_event_ignored():
    ctrl = OrthographicCameraController(1.5)
    before = ctrl.camera.projection_matrix
    ctrl.on_event(KeyPressedEvent(Key.A, 0))
    np.testing.assert_allclose(ctrl.camera.projection_matrix, before)
    assert ctrl.zoom_level == 1.0


def test_zoom_setter_does_not_touch_projection():
    ctrl = OrthographicCameraController(1.0)
    before = ctrl.camera.projection_matrix
    ctrl.zoom_level = 3.0
    assert ctrl.zoom_level == 3.0
    np.testing.assert_allclose(ctrl.camera.projection_matrix, before)