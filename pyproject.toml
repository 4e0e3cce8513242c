[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strawshmup"
version = "0.1.0"
description = "Game-logic pieces of a vertical shoot-'em-up: collision geometry, nickname dials, narrative pops and asset catalogues"
requires-python = ">=3.10"
dependencies = []
keywords = ["shmup", "game", "collision", "arcade", "nickname", "dialogue"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["strawshmup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
