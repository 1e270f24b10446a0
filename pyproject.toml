[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paperscore"
version = "0.1.0"
description = "Plain-text softball and baseball score files, run expectancy and batting statistics"
requires-python = ">=3.10"
keywords = [
    "softball",
    "baseball",
    "scorekeeping",
    "run-expectancy",
    "statistics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Information Analysis",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["paperscore"]

[tool.pytest.ini_options]
addopts = "-ra"
