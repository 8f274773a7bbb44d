[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marsrover"
version = "0.1.0"
description = "Simulate squads of robotic rovers exploring a rectangular plateau, with boundary and collision checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["mars", "rover", "simulation", "grid", "kata"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
marsrover = "marsrover.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["marsrover"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
