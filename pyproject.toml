[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cnfcache"
version = "0.1.0"
description = "CNF formula bookkeeping for model counters: literals, occurrence lists, connected components, compact component keys and hitting sets"
requires-python = ">=3.10"
dependencies = []
keywords = ["cnf", "sat", "model counting", "dimacs", "component caching", "knowledge compilation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["cnfcache"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
