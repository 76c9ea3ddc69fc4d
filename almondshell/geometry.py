"""Vertex and index data for meshes and textured quads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

Position = tuple[float, float, float]
TexCoord = tuple[float, float]


@dataclass
class Mesh:
    """Vertex data with four floats per vertex, plus an index list."""

    vertices: Sequence[float]
    indices: Sequence[int]
    vao: int = 0
    vertex_count: int = field(init=False)
    index_count: int = field(init=False)

    FLOATS_PER_VERTEX = 4

    def __post_init__(self) -> None:
        self.vertices = tuple(float(v) for v in self.vertices)
        self.indices = tuple(int(i) for i in self.indices)
        self.vertex_count = len(self.vertices) // self.FLOATS_PER_VERTEX
        self.index_count = len(self.indices)

    def has_vao(self) -> bool:
        """Return True once a vertex array object has been assigned."""
        return self.vao != 0


@dataclass
class Quad:
    """Interleaved vertex data: a 3-float position followed by 2 texture coordinates."""

    vertices: Sequence[float]
    indices: Sequence[int]
    vao: int = 0
    texture_id: int = 0
    vertex_count: int = field(init=False)
    index_count: int = field(init=False)

    POSITION_COMPONENTS = 3
    TEXCOORD_COMPONENTS = 2
    STRIDE = POSITION_COMPONENTS + TEXCOORD_COMPONENTS

    def __post_init__(self) -> None:
        self.vertices = tuple(float(v) for v in self.vertices)
        self.indices = tuple(int(i) for i in self.indices)
        if not self.vertices or not self.indices:
            raise ValueError("a quad needs at least one vertex and one index")
        self.vertex_count = len(self.vertices) // self.STRIDE
        self.index_count = len(self.indices)

    def has_vao(self) -> bool:
        """Return True once a vertex array object has been assigned."""
        return self.vao != 0

    def vertices_of(self, index: int) -> tuple[Position, TexCoord]:
        """Return the position and texture coordinates of one vertex."""
        if not 0 <= index < self.vertex_count:
            raise IndexError(
                f"vertex {index} out of range for {self.vertex_count} vertices"
            )
        start = index * self.STRIDE
        split = start + self.POSITION_COMPONENTS
        x, y, z = self.vertices[start:split]
        u, v = self.vertices[split:start + self.STRIDE]
        return (x, y, z), (u, v)