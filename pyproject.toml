[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structerr"
version = "0.1.6"
description = "Structured, serializable error types with kinds, codes, messages and details"
requires-python = ">=3.10"
dependencies = []
keywords = ["error", "exception", "serialization", "api", "structured-errors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["structerr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
