"""Orthographic cameras and the matrices they use."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Right-handed orthographic projection mapping depth to [-1, 1]."""
    if right == left or top == bottom or far == near:
        raise ValueError("orthographic projection needs non-empty ranges")
    m = np.eye(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


def _as_position(position: Sequence[float]) -> np.ndarray:
    vec = np.asarray(position, dtype=float)
    if vec.shape != (3,):
        raise ValueError("position must have three components")
    return vec.copy()


def _translation(position: np.ndarray) -> np.ndarray:
    m = np.eye(4)
    m[:3, 3] = position
    return m


def _rotation_z(degrees: float) -> np.ndarray:
    angle = math.radians(degrees)
    c, s = math.cos(angle), math.sin(angle)
    m = np.eye(4)
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return m


def view_matrix(position: Sequence[float], rotation: float) -> np.ndarray:
    """Inverse of the camera transform: translate, then rotate about Z (degrees)."""
    transform = _translation(_as_position(position)) @ _rotation_z(rotation)
    return np.linalg.inv(transform)


class _Camera2D:
    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = ortho(left, right, bottom, top, -1.0, 1.0)
        self._view = np.eye(4)
        self._position = np.zeros(3)
        self._rotation = 0.0
        self._view_projection = self._projection @ self._view

    @property
    def position(self) -> np.ndarray:
        """Camera position; assigning recomputes the view."""
        return self._position.copy()

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = _as_position(value)
        self._recalculate_view()

    @property
    def rotation(self) -> float:
        """Rotation about Z in degrees; assigning recomputes the view."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = float(value)
        self._recalculate_view()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection.copy()

    def _recalculate_view(self) -> None:
        self._view = view_matrix(self._position, self._rotation)
        self._view_projection = self._projection @ self._view


class OrthographicCamera(_Camera2D):
    """2D camera with an orthographic projection and adjustable bounds."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        super().__init__(left, right, bottom, top)

    def set_projection(self, left: float, right: float, bottom: float, top: float) -> None:
        """Replace the projection bounds, keeping the view."""
        self._projection = ortho(left, right, bottom, top, -1.0, 1.0)
        self._view_projection = self._projection @ self._view


class PerspectiveCamera(_Camera2D):
    """Camera with fixed bounds; its projection is orthographic."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        super().__init__(left, right, bottom, top)