# wireframe3d

A small software 3D renderer. It transforms vertices by hand through 4x4
matrices (model rotation and translation, perspective projection, divide by
`w`, NDC-to-viewport) and draws the result as a wireframe with pygame.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Running the demo

```
wireframe3d
```

This opens an 800x600 window titled "3D Renderer" showing a unit cube
spinning about the x axis (one degree every 20 ms), drawn as white triangle
outlines on black. Close the window to quit.

```
wireframe3d --verbose
```

does the same and also prints, every frame, the projection matrix and the
screen position of the cube's second vertex.

## Using the maths

```python
from wireframe3d.vec3 import Vec3
from wireframe3d.vec4 import Vec4
from wireframe3d.mat4 import Mat4

rotate = Mat4.rotation(45.0, Vec3(1.0, 0.0, 0.0))
move = Mat4.translation(0.0, 0.0, -2.0)
world = move * (rotate * Vec4(0.5, 0.5, 0.5))

project = Mat4.perspective(-1.0, 1.0, 1.0, -1.0, -0.1, -10.0)
clip = project * world
print(Mat4.ndc_to_viewport(800, 600) * Vec4(clip.x / clip.w, clip.y / clip.w, clip.z / clip.w))
```

### Vectors

- `Vec3(x, y, z)` supports `+`, `-` and component-wise `*` with another
  `Vec3`. Its components can also be read and set as `r`, `g`, `b`.
  `str()` gives `(x, y, z)`.
- `Vec4(x, y, z, w)` has `w` defaulting to `1.0`, and `r`, `g`, `b`, `a`
  aliases. Its `-` and `*` work on x, y and z component-wise and return a
  vector with `w` reset to 1. Note that `+` behaves the same as `-`: it
  returns the component-wise difference. `str()` gives `(x, y, z, w)`.

### Matrices

`Mat4` is a row-major 4x4 matrix. `Mat4()` is the identity; `Mat4(rows)`
takes four rows of four numbers and raises `ValueError` otherwise.

- `null()`, `identity()`
- `rotation(angle_in_degrees, axis)`: rotates about a single axis, the first
  non-zero component of `axis` (x, then y, then z). An all-zero axis gives
  the identity. Degrees are converted with pi taken as 3.1415.
- `translation(x, y, z)`, `scale(x_scale, y_scale, z_scale)`
- `orthographic(left, right, top, bottom, z_near, z_far)`
- `perspective(left, right, top, bottom, z_near, z_far)`: a perspective
  squash followed by the orthographic projection.
- `ndc_to_viewport(width, height)`: maps NDC to pixels, flipping y and moving
  the origin to the top left.

`m * other` multiplies by another `Mat4` or applies the matrix to a `Vec4`.
`m[row][col]` reads and writes elements, and matrices compare equal when all
elements match. `str(m)` prints one row per line; `m.format_elements()` gives
bracketed rows with six decimals.

## Drawing your own geometry

`wireframe3d.renderer` holds `Vertex`, `RenderMode` (`POINT` and
`TRIANGLES`), `triangle_edges(vertices)`, which returns the three edges of
each triangle, and `draw(surface, mode, vertices, color)`, which draws onto a
pygame surface: one pixel per vertex in point mode, triangle outlines in
triangle mode. In triangle mode the number of vertices must be a multiple of
three, or `ValueError` is raised. An unknown mode draws nothing.

`wireframe3d.app` exposes `cube_vertices()` (36 vertices, 12 triangles) and
`transform_vertex(vertex, ticks, width, height)`, the per-vertex pipeline the
demo uses, so you can reuse it with your own loop.

## What it does not do

There is no camera or view transform (the scene is always seen from the
origin looking down -z), no field-of-view based projection, no clipping or
depth handling, and no filled or shaded triangles: only points and outlines.