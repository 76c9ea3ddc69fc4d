[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "almondshell"
version = "0.1.0"
description = "Building blocks for small games: events, input, entities, scenes, save files, image loading, atlas packing and timing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game-engine",
    "ecs",
    "input",
    "texture-atlas",
    "bmp",
    "save-game",
    "scene",
    "timer",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
almondshell-fps = "almondshell.fps:main"

[tool.hatch.build.targets.wheel]
packages = ["almondshell"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
