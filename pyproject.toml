[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fireduck"
version = "0.1.0"
description = "A small 2D game about a fire-breathing duck and castles held together by mortar joints."
requires-python = ">=3.10"
keywords = ["game", "2d", "side-scroller", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fireduck = "fireduck.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fireduck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
