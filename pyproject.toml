[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "katas"
version = "0.1.0"
description = "Small data structures, a Game of Life, temperature tables, request routing, JSON API errors, threaded pipelines and file helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked-list",
    "stack",
    "game-of-life",
    "routing",
    "pipeline",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
katas-traversal = "katas.linked_list:traversal_main"
katas-life = "katas.life:main"
katas-temperature = "katas.temperature:main"
katas-wordcount = "katas.wordcount:main"
katas-compress = "katas.compress:main"
katas-count = "katas.cli:count_main"
katas-hello = "katas.cli:hello_main"

[tool.hatch.build.targets.wheel]
packages = ["katas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
