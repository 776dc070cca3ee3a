[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "horizon"
version = "0.1.0"
description = "A small component-based 2D game engine on pygame: scenes, game objects, components, triggers, observers, input and queued sound."
requires-python = ">=3.10"
keywords = ["game engine", "2d", "components", "scenes", "observer", "pygame"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["horizon"]

[tool.pytest.ini_options]
addopts = "-ra"
