"""Keyboard and mouse driven control of an orthographic camera."""

from __future__ import annotations

import numpy as np

from razel.camera import OrthographicCamera
from razel.codes import Key
from razel.events import (
    Event,
    EventDispatcher,
    MouseScrolledEvent,
    WindowResizeEvent,
)
from razel.input import Input
from razel.timestep import Timestep

_ZOOM_STEP = 0.25
_MIN_ZOOM = 0.25


class OrthographicCameraController:
    """Moves with WASD, rotates with Q/E, zooms with the scroll wheel."""

    def __init__(self, aspect_ratio: float, rotation: bool = True) -> None:
        self._aspect_ratio = float(aspect_ratio)
        self._zoom_level = 1.0
        self._camera = OrthographicCamera(*self._bounds())
        self._rotation = rotation
        self._camera_position = np.zeros(3)
        self._camera_rotation = 0.0
        self._translation_speed = 5.0
        self._rotation_speed = 180.0

    @property
    def camera(self) -> OrthographicCamera:
        return self._camera

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @property
    def zoom_level(self) -> float:
        """Zoom level; assigning does not change the projection by itself."""
        return self._zoom_level

    @zoom_level.setter
    def zoom_level(self, level: float) -> None:
        self._zoom_level = float(level)

    def _bounds(self) -> tuple[float, float, float, float]:
        zoom = self._zoom_level
        return (-self._aspect_ratio * zoom, self._aspect_ratio * zoom, -zoom, zoom)

    def on_update(self, ts: Timestep) -> None:
        """Apply held keys for one frame of length ``ts``."""
        dt = float(ts)
        step = self._translation_speed * dt
        if Input.is_key_pressed(Key.A):
            self._camera_position[0] -= step
        elif Input.is_key_pressed(Key.D):
            self._camera_position[0] += step

        if Input.is_key_pressed(Key.W):
            self._camera_position[1] += step
        elif Input.is_key_pressed(Key.S):
            self._camera_position[1] -= step

        if self._rotation:
            if Input.is_key_pressed(Key.Q):
                self._camera_rotation += self._rotation_speed * dt
            if Input.is_key_pressed(Key.E):
                self._camera_rotation -= self._rotation_speed * dt

        self._camera.position = self._camera_position
        self._camera.rotation = self._camera_rotation
        self._translation_speed = self._zoom_level

    def on_event(self, event: Event) -> None:
        """React to scrolling and window resizing."""
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(MouseScrolledEvent, self._on_mouse_scrolled)
        dispatcher.dispatch(WindowResizeEvent, self._on_window_resized)

    def _on_mouse_scrolled(self, event: MouseScrolledEvent) -> bool:
        self._zoom_level = max(self._zoom_level - event.y_offset * _ZOOM_STEP, _MIN_ZOOM)
        self._camera.set_projection(*self._bounds())
        return False

    def _on_window_resized(self, event: WindowResizeEvent) -> bool:
        self._aspect_ratio = event.width / event.height
        self._camera.set_projection(*self._bounds())
        return False