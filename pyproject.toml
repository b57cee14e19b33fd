[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "megaladon"
version = "0.1.0"
description = "A tree-walking interpreter for the small Megaladon scripting language"
requires-python = ">=3.10"
keywords = ["interpreter", "scripting", "language", "repl", "tree-walking"]
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
    "Topic :: Software Development :: Interpreters",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
megaladon = "megaladon.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["megaladon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
