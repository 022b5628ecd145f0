[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sclexer"
version = "0.1.0"
description = "Lexical analyser for a small keyword-based teaching language"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "scanner", "compiler", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
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
sclexer = "sclexer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sclexer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
