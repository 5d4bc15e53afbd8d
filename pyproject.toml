[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "katakit"
version = "0.1.0"
description = "Small, well-tested solutions to classic sorting, array, matrix and puzzle exercises"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "exercises", "sorting", "matrix", "arrays", "puzzles", "kata"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["katakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
