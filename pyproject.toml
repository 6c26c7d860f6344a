[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minitools"
version = "0.1.0"
description = "Small command-line utilities: calculator, base converter, matrices, statistics, text tools, student records and tic-tac-toe."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "calculator",
    "converter",
    "matrix",
    "statistics",
    "text-analysis",
    "tictactoe",
    "utilities",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minitools-calculator = "minitools.calculator:main"
minitools-converter = "minitools.converter:main"
minitools-matrixops = "minitools.matrixops:main"
minitools-numberanalyser = "minitools.numberanalyser:main"
minitools-patterns = "minitools.patterngenerator:main"
minitools-pointergymnastics = "minitools.pointergymnastics:main"
minitools-resistor = "minitools.resistor:main"
minitools-stats = "minitools.statslibrary:main"
minitools-strings = "minitools.stringprocessor:main"
minitools-students = "minitools.studentdatabase:main"
minitools-textanalysis = "minitools.textanalysis:main"
minitools-tictactoe = "minitools.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["minitools"]

[tool.hatch.build.targets.sdist]
include = ["minitools", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
