"""A small software wireframe 3D renderer with hand-written matrix maths."""

__version__ = "0.1.0"
__all__ = ["vec3", "vec4", "mat4", "renderer", "app"]