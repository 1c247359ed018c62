"""Shader sources, their preprocessing, and a named shader library."""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Mapping, Sequence

import numpy as np

_TYPE_TOKEN = "#type"
_LINE_BREAK = re.compile(r"[\r\n]")
_NOT_LINE_BREAK = re.compile(r"[^\r\n]")


class ShaderType(Enum):
    """Pipeline stage a piece of shader source belongs to."""

    VERTEX = "vertex"
    FRAGMENT = "fragment"


class ShaderError(Exception):
    """A shader file could not be read or parsed."""


def shader_type_from_string(name: str) -> ShaderType:
    """Map a ``#type`` name such as ``vertex`` to its stage."""
    try:
        return ShaderType(name)
    except ValueError:
        raise ShaderError(f"invalid shader type ({name}) specified") from None


def preprocess(source: str) -> dict[ShaderType, str]:
    """Split a combined source into stages marked by ``#type <stage>`` lines."""
    sources: dict[ShaderType, str] = {}
    pos = source.find(_TYPE_TOKEN)
    while pos != -1:
        eol = _LINE_BREAK.search(source, pos)
        if eol is None:
            raise ShaderError("syntax error: '#type' line has no line break")
        begin = pos + len(_TYPE_TOKEN) + 1
        stage = shader_type_from_string(source[begin : eol.start()])
        body = _NOT_LINE_BREAK.search(source, eol.start())
        next_line = body.start() if body is not None else len(source)
        pos = source.find(_TYPE_TOKEN, next_line)
        sources[stage] = source[next_line : pos if pos != -1 else len(source)]
    return sources


def read_shader_file(filepath: str | Path) -> str:
    """Return the whole file as text, line endings untouched."""
    try:
        return Path(filepath).read_bytes().decode("utf-8")
    except OSError as exc:
        raise ShaderError(f"could not open file '{filepath}'") from exc


def shader_name_from_path(filepath: str | Path) -> str:
    """File name without directory and extension."""
    return Path(filepath).stem


class Shader:
    """A shader program: its stage sources, bind state and uniform values."""

    def __init__(self, name: str, sources: Mapping[ShaderType, str]) -> None:
        self._name = name
        self._sources = dict(sources)
        self._bound = False
        self._uniforms: dict[str, Any] = {}

    @classmethod
    def from_file(cls, filepath: str | Path) -> Shader:
        """Load a combined source file; the name is the file's stem."""
        return cls(shader_name_from_path(filepath), preprocess(read_shader_file(filepath)))

    @classmethod
    def from_sources(cls, name: str, vertex_src: str, fragment_src: str) -> Shader:
        """Build a shader from separate vertex and fragment sources."""
        return cls(name, {ShaderType.VERTEX: vertex_src, ShaderType.FRAGMENT: fragment_src})

    @property
    def name(self) -> str:
        return self._name

    @property
    def sources(self) -> dict[ShaderType, str]:
        return dict(self._sources)

    @property
    def bound(self) -> bool:
        """Whether the program is the one in use."""
        return self._bound

    @property
    def uniforms(self) -> dict[str, Any]:
        """Uniform values uploaded so far, by name."""
        return dict(self._uniforms)

    def bind(self) -> None:
        self._bound = True

    def unbind(self) -> None:
        self._bound = False

    def _upload_array(self, name: str, value: Sequence[Any], shape: tuple[int, ...]) -> None:
        array = np.array(value, dtype=float)
        if array.shape != shape:
            raise ValueError(f"uniform '{name}' needs shape {shape}, got {array.shape}")
        self._uniforms[name] = array

    def upload_uniform_int(self, name: str, value: int) -> None:
        self._uniforms[name] = int(value)

    def upload_uniform_float(self, name: str, value: float) -> None:
        self._uniforms[name] = float(value)

    def upload_uniform_float2(self, name: str, value: Sequence[float]) -> None:
        self._upload_array(name, value, (2,))

    def upload_uniform_float3(self, name: str, value: Sequence[float]) -> None:
        self._upload_array(name, value, (3,))

    def upload_uniform_float4(self, name: str, value: Sequence[float]) -> None:
        self._upload_array(name, value, (4,))

    def upload_uniform_mat3(self, name: str, matrix: Any) -> None:
        self._upload_array(name, matrix, (3, 3))

    def upload_uniform_mat4(self, name: str, matrix: Any) -> None:
        self._upload_array(name, matrix, (4, 4))

    def __repr__(self) -> str:
        return f"Shader({self._name!r})"


class ShaderLibrary:
    """Shaders stored under unique names."""

    def __init__(self, factory: Callable[[str | Path], Shader] | None = None) -> None:
        self._factory = factory if factory is not None else Shader.from_file
        self._shaders: dict[str, Shader] = {}

    def add(self, shader: Shader, name: str | None = None) -> None:
        """Store ``shader`` under ``name``, or under its own name."""
        key = shader.name if name is None else name
        if key in self._shaders:
            raise ValueError(f"shader '{key}' already exists")
        self._shaders[key] = shader

    def load(self, filepath: str | Path, name: str | None = None) -> Shader:
        """Create a shader from a file, store it and return it."""
        shader = self._factory(filepath)
        self.add(shader, name)
        return shader

    def get(self, name: str) -> Shader:
        try:
            return self._shaders[name]
        except KeyError:
            raise KeyError(f"shader '{name}' not found") from None

    def exists(self, name: str) -> bool:
        return name in self._shaders

    def __contains__(self, name: object) -> bool:
        return name in self._shaders

    def __len__(self) -> int:
        return len(self._shaders)