[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pipenet"
version = "0.1.0"
description = "Interactive console manager for pipes and compressor stations of a gas transport network"
requires-python = ">=3.10"
dependencies = []
keywords = ["pipeline", "compressor station", "gas network", "console", "inventory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pipenet = "pipenet.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pipenet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
