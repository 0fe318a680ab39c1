[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lyra"
version = "0.1.0"
description = "Lexer, parser and compiler driver for the Lyra language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "parser", "language", "lyra"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lyra = "lyra.cli:main"
lyrac = "lyra.cli:lyrac_main"

[tool.hatch.build.targets.wheel]
packages = ["lyra"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
