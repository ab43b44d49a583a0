[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yaskk"
version = "0.1.0"
description = "SKK dictionary tools: JISYO line reading, block lookup, JISYO writing, Google response parsing and server option validation"
requires-python = ">=3.10"
dependencies = []
keywords = ["skk", "jisyo", "japanese", "input-method", "dictionary", "kana-kanji"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["yaskk"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
