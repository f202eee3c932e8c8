[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "floodmouse"
version = "0.1.0"
description = "A flood-fill micromouse controller that talks to a maze simulator over standard input and output"
requires-python = ">=3.10"
dependencies = []
keywords = ["micromouse", "maze", "flood-fill", "robot", "simulator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
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
floodmouse = "floodmouse.mouse:main"

[tool.hatch.build.targets.wheel]
packages = ["floodmouse"]

[tool.pytest.ini_options]
addopts = "-ra"
