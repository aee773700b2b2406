[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlore"
version = "0.2.6"
description = "A small HTML tokenizer and parser that builds a DOM tree, with a minimal CSS tokenizer and a table of named colours."
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "css", "dom", "parser", "tokenizer", "colors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["netlore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
