[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubecast"
version = "0.1.0"
description = "Ray-casting game core: map geometry, software canvas, entities, minimap and the string helpers behind them"
requires-python = ">=3.10"
dependencies = []
keywords = ["raycasting", "game", "minimap", "canvas", "strings"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubecast"]

[tool.pytest.ini_options]
addopts = "-ra"
