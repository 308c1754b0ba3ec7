[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "colorless-memory"
version = "0.1.0"
description = "A two-player networked memory card game with a lobby server and a pygame client."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["memory", "card game", "multiplayer", "pygame", "puzzle", "lobby"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
colorless-memory = "colorless_memory.app:run_client"
colorless-memory-server = "colorless_memory.app:run_server"
colorless-memory-local = "colorless_memory.app:run_all_in_one"

[tool.hatch.build.targets.wheel]
packages = ["colorless_memory"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
