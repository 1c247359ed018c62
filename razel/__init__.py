"""Core of a layered rendering engine: events, layers, timestep, key codes, buffer layouts, cameras, input, shaders and renderer."""

__version__ = "0.1.0"

__all__ = [
    "timestep",
    "codes",
    "events",
    "layers",
    "buffer",
    "camera",
    "input",
    "camera_controller",
    "shader",
    "renderer",
]