"""Rendering back-end interface and the scene renderer built on it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, ClassVar, Sequence

import numpy as np

from razel.camera import OrthographicCamera
from razel.shader import Shader


class GraphicsAPI(IntEnum):
    """Graphics interfaces a back end can drive."""

    NONE = 0
    OPENGL = 1
    DIRECTX11 = 2


class RendererAPI(ABC):
    """Low-level drawing commands supplied by a graphics back end."""

    graphics_api: ClassVar[GraphicsAPI] = GraphicsAPI.NONE

    @abstractmethod
    def init(self) -> None:
        """Prepare the back end for drawing."""

    @abstractmethod
    def set_viewport(self, x: int, y: int, width: int, height: int) -> None:
        """Set the drawable area."""

    @abstractmethod
    def set_clear_color(self, color: Sequence[float]) -> None:
        """Set the RGBA colour used by ``clear``."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the frame."""

    @abstractmethod
    def draw_indexed(self, vertex_array: Any) -> None:
        """Draw the vertex array through its index buffer."""


class Renderer:
    """Scene-level rendering: camera setup and geometry submission."""

    def __init__(self, api: RendererAPI) -> None:
        self._api = api
        self._view_projection = np.eye(4)
        self._in_scene = False

    @property
    def api(self) -> RendererAPI:
        """The back end receiving the commands."""
        return self._api

    @property
    def graphics_api(self) -> GraphicsAPI:
        return self._api.graphics_api

    @property
    def view_projection(self) -> np.ndarray:
        """View-projection matrix of the current scene."""
        return self._view_projection.copy()

    @property
    def in_scene(self) -> bool:
        """Whether a scene has begun and not yet ended."""
        return self._in_scene

    def init(self) -> None:
        self._api.init()

    def on_window_resize(self, width: int, height: int) -> None:
        self._api.set_viewport(0, 0, width, height)

    def begin_scene(self, camera: OrthographicCamera) -> None:
        """Take the camera's view-projection for the following submissions."""
        self._view_projection = camera.view_projection_matrix
        self._in_scene = True

    def end_scene(self) -> None:
        """Finish the scene; submissions are drawn immediately."""
        self._in_scene = False

    def submit(self, shader: Shader, vertex_array: Any, transform: Any = None) -> None:
        """Bind the shader, upload the scene and model matrices, and draw."""
        model = np.eye(4) if transform is None else transform
        shader.bind()
        shader.upload_uniform_mat4("u_ViewProjection", self._view_projection)
        shader.upload_uniform_mat4("u_Transform", model)
        vertex_array.bind()
        self._api.draw_indexed(vertex_array)