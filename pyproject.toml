[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lightyears"
version = "1.0.0"
description = "A small 2D game engine and space-shooter demo built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "pygame", "2d", "shooter", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lightyears = "lightyears.game:main"

[tool.hatch.build.targets.wheel]
packages = ["lightyears"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
