[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vicky_econ"
version = "0.1.0"
description = "Economic model of goods, prices, buildings, locations and production methods for a grand-strategy game"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "economy", "market", "strategy-game", "prices"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vicky_econ"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
