"""Reading vertex and fragment shader source files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, os.PathLike]


class ShaderSourceError(OSError):
    """Raised when a shader source file cannot be read."""


@dataclass(frozen=True)
class ShaderSources:
    """The source text of a vertex and a fragment shader."""

    vertex: str
    fragment: str


def read_shader_source(path: PathLike) -> str:
    """Return the whole text of a shader file."""
    try:
        return Path(path).read_text()
    except OSError as exc:
        raise ShaderSourceError(
            f"Could not open shader file: {os.fspath(path)}"
        ) from exc


def load_shader_sources(vertex_path: PathLike, fragment_path: PathLike) -> ShaderSources:
    """Read both shader sources of a program."""
    return ShaderSources(
        vertex=read_shader_source(vertex_path),
        fragment=read_shader_source(fragment_path),
    )