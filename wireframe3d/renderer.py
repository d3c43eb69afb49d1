"""Wireframe drawing of vertices onto a pygame surface."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

import pygame


@dataclass
class Vertex:
    """A point in space; after projection, x and y are pixel coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class RenderMode(IntEnum):
    """How a vertex list is turned into pixels."""

    POINT = 0
    TRIANGLES = 1


def triangle_edges(vertices: Sequence[Vertex]) -> list[tuple[Vertex, Vertex]]:
    """Split a triangle list into its edges: v1-v2, v2-v3, v3-v1 for each triangle.

    Raises ValueError if the number of vertices is not a multiple of three.
    """
    if len(vertices) % 3 != 0:
        raise ValueError(
            f"triangle list needs a multiple of 3 vertices, got {len(vertices)}"
        )
    edges: list[tuple[Vertex, Vertex]] = []
    triangles = zip(*[iter(vertices)] * 3)
    for first, second, third in triangles:
        edges.extend(((first, second), (second, third), (third, first)))
    return edges


def draw(surface: pygame.Surface, mode: int, vertices: Sequence[Vertex], color) -> None:
    """Draw vertices as single pixels or as triangle outlines in the given colour.

    An unknown mode draws nothing.
    """
    if mode == RenderMode.POINT:
        for vertex in vertices:
            surface.set_at((int(vertex.x), int(vertex.y)), color)
    elif mode == RenderMode.TRIANGLES:
        for start, end in triangle_edges(vertices):
            pygame.draw.line(surface, color, (start.x, start.y), (end.x, end.y))