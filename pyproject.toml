[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "friendnet"
version = "0.1.0"
description = "A small social-network database: user profiles in a fixed-width file, indexed by a red-black tree, with friendship lists."
requires-python = ">=3.10"
dependencies = []
keywords = ["red-black tree", "social network", "profiles", "fixed-width records"]
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
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
friendnet = "friendnet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["friendnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
