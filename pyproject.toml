[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flut"
version = "0.1.0"
description = "A small retained-mode widget toolkit on pygame with layout, animation helpers and a worm game demo"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["gui", "widgets", "layout", "animation", "game", "pygame"]
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
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
flut-worm = "flut.worm.main:main"

[tool.hatch.build.targets.wheel]
packages = ["flut"]

[tool.hatch.build.targets.sdist]
include = ["flut", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
