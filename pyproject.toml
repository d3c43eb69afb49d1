[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wireframe3d"
version = "0.1.0"
description = "A small software wireframe renderer: 4x4 matrix maths, perspective projection and a spinning cube in a pygame window"
requires-python = ">=3.10"
keywords = ["3d", "renderer", "wireframe", "matrix", "projection", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wireframe3d = "wireframe3d.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wireframe3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
