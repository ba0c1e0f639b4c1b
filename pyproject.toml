[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tokenshell"
version = "0.1.0"
description = "A small interactive tokenizer shell with numbered history, plus an argument sorter backed by a binary search tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["tokenizer", "shell", "history", "binary search tree", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tokenshell = "tokenshell.uimain:main"
sortargs = "tokenshell.sortargs:main"

[tool.hatch.build.targets.wheel]
packages = ["tokenshell"]

[tool.pytest.ini_options]
addopts = "-ra"
