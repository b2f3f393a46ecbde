[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "insanelang"
version = "0.1.0"
description = "Front end for the InsaneLang toy language: lexer, parser stub and textual IR generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "parser", "language", "tokenizer"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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
insanelang = "insanelang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["insanelang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
