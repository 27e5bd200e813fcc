[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paretoind"
version = "0.1.0"
description = "Quality indicators for multi-objective optimisation: hypervolume, epsilon, IGD and set dominance"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "multi-objective",
    "pareto",
    "hypervolume",
    "epsilon indicator",
    "igd",
    "performance assessment",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dominatedsets = "paretoind.dominance:main"
igd = "paretoind.igd_cli:main"
epsilon = "paretoind.epsilon_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["paretoind"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
