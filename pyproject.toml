[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gconvkit"
version = "0.1.0"
description = "Helpers for empty and kind checks, string normalisation, switchable locks, replayable byte readers and dataclass field tags."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "dataclasses", "field tags", "introspection", "locks", "strings"]
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
packages = ["gconvkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
