import pytest

from wireframe3d.app import cube_vertices, transform_vertex
from wireframe3d.renderer import Vertex, triangle_edges


def test_cube_has_twelve_triangles():
    verts = cube_vertices()
    assert len(verts) == 36
    assert len(triangle_edges(verts)) == 36


def test_cube_coordinates_are_half_units():
    for v in cube_vertices():
        assert {abs(v.x), abs(v.y), abs(v.z)} == {0.5}


def test_cube_has_eight_distinct_corners():
    corners = {(v.x, v.y, v.z) for v in cube_vertices()}
    assert len(corners) == 8


def test_cube_triangles_lie_on_faces():
    verts = cube_vertices()
    for tri in zip(*[iter(verts)] * 3):
        shared = [
            axis
            for axis in ("x", "y", "z")
            if len({getattr(v, axis) for v in tri}) == 1
        ]
        assert len(shared) == 1


def test_cube_first_vertex_matches_source():
    assert cube_vertices()[0] == Vertex(-0.5, -0.5, -0.5)


@pytest.mark.parametrize("z", [-0.5, 0.0, 0.5])
def test_points_on_view_axis_land_at_screen_centre(z):
    out = transform_vertex(Vertex(0.0, 0.0, z), 0, 800, 600)
    assert out.x == pytest.approx(800 / 2)
    assert out.y == pytest.approx(600 / 2)


def test_mirror_in_x_is_mirrored_on_screen():
    left = transform_vertex(Vertex(-0.5, 0.25, 0.5), 0, 800, 600)
    right = transform_vertex(Vertex(0.5, 0.25, 0.5), 0, 800, 600)
    assert left.x + right.x == pytest.approx(800)
    assert left.y == pytest.approx(right.y)


def test_angle_steps_every_twenty_ticks():
    v = Vertex(0.5, 0.5, 0.5)
    assert transform_vertex(v, 0, 800, 600) == transform_vertex(v, 19, 800, 600)
    assert transform_vertex(v, 0, 800, 600) != transform_vertex(v, 20, 800, 600)


def test_full_turn_returns_close_to_start():
    v = Vertex(0.5, -0.5, 0.5)
    start = transform_vertex(v, 0, 800, 600)
    turned = transform_vertex(v, 360 * 20, 800, 600)
    assert turned.x == pytest.approx(start.x, abs=1e-2)
    assert turned.y == pytest.approx(start.y, abs=1e-2)


def test_rotation_about_x_keeps_screen_x_for_axis_points():
    v = Vertex(0.0, 0.5, 0.5)
    for ticks in (0, 400, 1800, 3000):
        assert transform_vertex(v, ticks, 800, 600).x == pytest.approx(400)


def test_viewport_size_scales_screen_offsets():
    v = Vertex(0.5, 0.5, 0.5)
    small = transform_vertex(v, 0, 400, 300)
    large = transform_vertex(v, 0, 800, 600)
    assert (large.x - 400) == pytest.approx(2 * (small.x - 200))
    assert (large.y - 300) == pytest.approx(2 * (small.y - 150))