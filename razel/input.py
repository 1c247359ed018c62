"""Global polling of keyboard and mouse state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class InputBackend(ABC):
    """Platform source of input state."""

    @abstractmethod
    def is_key_pressed(self, keycode: int) -> bool:
        """Whether the key is held down."""

    @abstractmethod
    def is_mouse_button_pressed(self, button: int) -> bool:
        """Whether the mouse button is held down."""

    @abstractmethod
    def mouse_position(self) -> tuple[float, float]:
        """Cursor position as (x, y)."""


class Input:
    """Global access to the installed input backend."""

    _backend: ClassVar[InputBackend | None] = None

    def __init__(self) -> None:
        raise TypeError("Input is not instantiable; use its class methods")

    @classmethod
    def set_backend(cls, backend: InputBackend | None) -> None:
        """Install the backend queried by the other methods; None removes it."""
        cls._backend = backend

    @classmethod
    def _require(cls) -> InputBackend:
        if cls._backend is None:
            raise RuntimeError("no input backend installed")
        return cls._backend

    @classmethod
    def is_key_pressed(cls, keycode: int) -> bool:
        return bool(cls._require().is_key_pressed(keycode))

    @classmethod
    def is_mouse_button_pressed(cls, button: int) -> bool:
        return bool(cls._require().is_mouse_button_pressed(button))

    @classmethod
    def mouse_position(cls) -> tuple[float, float]:
        x, y = cls._require().mouse_position()
        return float(x), float(y)

    @classmethod
    def mouse_x(cls) -> float:
        return cls.mouse_position()[0]

    @classmethod
    def mouse_y(cls) -> float:
        return cls.mouse_position()[1]