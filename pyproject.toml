[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chessgrid"
version = "0.1.0"
description = "A two-player chess board you play by dragging pieces with the mouse"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["chess", "board game", "pygame", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chessgrid = "chessgrid.game:main"

[tool.hatch.build.targets.wheel]
packages = ["chessgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
