[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bstrainer"
version = "0.1.0"
description = "Interactive blackjack basic strategy trainer for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["blackjack", "basic strategy", "trainer", "cards", "quiz"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bstrainer = "bstrainer.trainer:main"

[tool.hatch.build.targets.wheel]
packages = ["bstrainer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
