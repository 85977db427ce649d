[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "axisql"
version = "0.1.0"
description = "A tiny in-memory SQL-like database engine with a command shell and a script interpreter"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "sql", "interpreter", "in-memory", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
axisql = "axisql.interpreter:main"
axiscli = "axisql.cli:main"
axisql-demo = "axisql.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["axisql"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
