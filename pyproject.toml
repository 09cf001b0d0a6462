[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stormdsl"
version = "0.1.0"
description = "Parser, intermediate representation and validator for the storm schema definition language"
requires-python = ">=3.10"
dependencies = []
keywords = ["schema", "dsl", "database", "validation", "sql", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stormdsl = "stormdsl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stormdsl"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
