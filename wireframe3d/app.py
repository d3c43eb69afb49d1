"""Window that shows a spinning wireframe cube."""

from __future__ import annotations

import argparse

import pygame

from wireframe3d.mat4 import Mat4
from wireframe3d.renderer import RenderMode, Vertex, draw
from wireframe3d.vec3 import Vec3
from wireframe3d.vec4 import Vec4

WIDTH = 800
HEIGHT = 600
TITLE = "3D Renderer"

_FACES = (
    ((-1, -1, -1), (1, -1, -1), (1, 1, -1), (1, 1, -1), (-1, 1, -1), (-1, -1, -1)),
    ((-1, -1, 1), (1, -1, 1), (1, 1, 1), (1, 1, 1), (-1, 1, 1), (-1, -1, 1)),
    ((-1, 1, 1), (-1, 1, -1), (-1, -1, -1), (-1, -1, -1), (-1, -1, 1), (-1, 1, 1)),
    ((1, 1, 1), (1, 1, -1), (1, -1, -1), (1, -1, -1), (1, -1, 1), (1, 1, 1)),
    ((-1, -1, -1), (1, -1, -1), (1, -1, 1), (1, -1, 1), (-1, -1, 1), (-1, -1, -1)),
    ((-1, 1, -1), (1, 1, -1), (1, 1, 1), (1, 1, 1), (-1, 1, 1), (-1, 1, -1)),
)


def cube_vertices() -> list[Vertex]:
    """A unit cube centred on the origin, as 12 triangles (36 vertices)."""
    return [
        Vertex(sx * 0.5, sy * 0.5, sz * 0.5)
        for face in _FACES
        for sx, sy, sz in face
    ]


def _projection() -> Mat4:
    return Mat4.perspective(-1.0, 1.0, 1.0, -1.0, -0.1, -10.0)


def transform_vertex(vertex: Vertex, ticks: int, width: float, height: float) -> Vertex:
    """Rotate, move, project and map a model-space vertex to screen pixels.

    The cube turns about the x axis by one degree every 20 milliseconds of ticks.
    """
    angle = float(int(ticks) // 20)
    rotation = Mat4.rotation(angle, Vec3(1.0, 0.0, 0.0))
    translation = Mat4.translation(0.0, 0.0, -2.0)

    world = translation * (rotation * Vec4(vertex.x, vertex.y, vertex.z))
    projected = _projection() * world
    ndc = Vec4(projected.x / projected.w, projected.y / projected.w, projected.z / projected.w)

    screen = Mat4.ndc_to_viewport(width, height) * ndc
    return Vertex(screen.x, screen.y, screen.z)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wireframe3d", description="Show a spinning wireframe cube.")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="print the projection matrix and intermediate values every frame",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the window and render until it is closed."""
    args = _parse_args(argv)

    try:
        pygame.display.init()
    except pygame.error:
        print("Failed to initialize video")

    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)

    model = cube_vertices()
    white = (255, 255, 255, 255)

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            screen.fill((0, 0, 0))

            ticks = pygame.time.get_ticks()
            transformed = [transform_vertex(v, ticks, WIDTH, HEIGHT) for v in model]
            if args.verbose:
                print(_projection())
                print(f"{transformed[1].x:g}, {transformed[1].y:g}")

            draw(screen, RenderMode.TRIANGLES, transformed, white)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0