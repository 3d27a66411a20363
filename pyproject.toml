[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "opal"
version = "0.1.0"
description = "Lexer and interactive prompt for the Opal programming language"
requires-python = ">=3.10"
dependencies = []
keywords = ["opal", "lexer", "tokenizer", "repl", "programming-language"]
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
opal = "opal.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["opal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
