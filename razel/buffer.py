"""Vertex buffer element types and layouts."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator


class ShaderDataType(Enum):
    """Data types a vertex attribute can have."""

    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT3 = 5
    MAT4 = 6
    INT = 7
    INT2 = 8
    INT3 = 9
    INT4 = 10
    BOOL = 11


_SIZES = {
    ShaderDataType.FLOAT: 4,
    ShaderDataType.FLOAT2: 4 * 2,
    ShaderDataType.FLOAT3: 4 * 3,
    ShaderDataType.FLOAT4: 4 * 4,
    ShaderDataType.MAT3: 4 * 3 * 3,
    ShaderDataType.MAT4: 4 * 4 * 4,
    ShaderDataType.INT: 4,
    ShaderDataType.INT2: 4 * 2,
    ShaderDataType.INT3: 4 * 3,
    ShaderDataType.INT4: 4 * 4,
    ShaderDataType.BOOL: 1,
}

_COMPONENTS = {
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT3: 3 * 3,
    ShaderDataType.MAT4: 4 * 4,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.BOOL: 1,
}


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Size in bytes of one value of ``data_type``."""
    try:
        return _SIZES[data_type]
    except KeyError:
        raise ValueError(f"unknown shader data type: {data_type!r}") from None


@dataclass(frozen=True)
class BufferElement:
    """One attribute within a vertex; ``offset`` is set by the layout."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    offset: int = 0
    size: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", shader_data_type_size(self.data_type))

    def component_count(self) -> int:
        """Number of scalar components in the attribute."""
        try:
            return _COMPONENTS[self.data_type]
        except KeyError:
            raise ValueError(f"unknown shader data type: {self.data_type!r}") from None


class BufferLayout:
    """Ordered attributes of a vertex, with offsets and stride computed."""

    def __init__(self, elements: Iterable[BufferElement] = ()) -> None:
        placed: list[BufferElement] = []
        offset = 0
        for element in elements:
            placed.append(dataclasses.replace(element, offset=offset))
            offset += element.size
        self._elements = tuple(placed)
        self._stride = offset

    @property
    def stride(self) -> int:
        """Bytes from one vertex to the next."""
        return self._stride

    @property
    def elements(self) -> tuple[BufferElement, ...]:
        """The elements with their offsets."""
        return self._elements

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"BufferLayout({list(self._elements)!r})"