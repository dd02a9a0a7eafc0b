[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bddsuite"
version = "0.11.0rc2"
description = "Building blocks for a behaviour-driven test runner: colored output, a formatter registry, run options with flag parsing, and a version command."
requires-python = ">=3.10"
dependencies = []
keywords = ["bdd", "gherkin", "cucumber", "testing", "formatters", "ansi", "flags"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing :: BDD",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bddsuite = "bddsuite.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bddsuite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
