[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "razel"
version = "0.1.0"
description = "Core of a small layered 2D rendering engine: events, layers, buffer layouts, cameras, shaders and a backend-agnostic renderer"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["rendering", "engine", "camera", "shader", "events", "layers", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["razel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
