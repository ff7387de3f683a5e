[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ncutools"
version = "0.1.0"
description = "Small utilities: an HTML tree builder, calendar date arithmetic, countdown timers and text helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "dates", "timer", "countdown", "utilities"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest", "freezegun"]

[tool.hatch.build.targets.wheel]
packages = ["ncutools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
