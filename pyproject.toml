[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "regokit"
version = "0.1.0"
description = "Builtin helpers for policy evaluation: type checks, unit parsing, UUID inspection, and Go-style time layouts and durations"
requires-python = ">=3.10"
dependencies = []
keywords = ["rego", "policy", "builtins", "duration", "uuid", "time-format", "units"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["regokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
