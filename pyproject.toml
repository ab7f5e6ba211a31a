[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lierokit"
version = "0.1.0"
description = "Data-file readers, palette-indexed drawing primitives and settings handling for the Liero worm game"
requires-python = ">=3.10"
dependencies = []
keywords = ["liero", "game", "worms", "palette", "sprites", "settings"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lierokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
