"""Splitting of combined GLSL files into vertex and fragment sources."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum


class _Stage(Enum):
    NONE = -1
    VERTEX = 0
    FRAGMENT = 1


@dataclass(frozen=True)
class ShaderSources:
    """Vertex and fragment shader text."""

    vertex: str
    fragment: str


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def split_shader_source(text: str) -> ShaderSources:
    """Split text with ``#shader vertex`` / ``#shader fragment`` markers.

    Lines before the first marker are ignored; every kept line ends in a newline.
    """
    parts: dict[_Stage, list[str]] = {_Stage.VERTEX: [], _Stage.FRAGMENT: []}
    current = _Stage.NONE
    for line in _lines(text):
        if "#shader" in line:
            if "vertex" in line:
                current = _Stage.VERTEX
            elif "fragment" in line:
                current = _Stage.FRAGMENT
        elif current is not _Stage.NONE:
            parts[current].append(line + "\n")
    return ShaderSources(
        vertex="".join(parts[_Stage.VERTEX]),
        fragment="".join(parts[_Stage.FRAGMENT]),
    )


def load_shader_file(path: str | os.PathLike[str]) -> ShaderSources:
    """Read a combined shader file and split it."""
    with open(path, encoding="utf-8", newline="") as stream:
        return split_shader_source(stream.read())