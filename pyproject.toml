[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dflatkit"
version = "0.1.0"
description = "Building blocks of a text-mode windowing toolkit: CP437 text, Huffman help-file compression, help indexes, message queues and window trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "text-mode",
    "tui",
    "cp437",
    "huffman",
    "help-files",
    "message-queue",
    "windowing",
]
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
    "Topic :: Software Development :: User Interfaces",
    "Topic :: System :: Archiving :: Compression",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dflat-huffc = "dflatkit.huffc:main"

[tool.hatch.build.targets.wheel]
packages = ["dflatkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
