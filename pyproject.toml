[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sueca"
version = "0.1.0"
description = "Rules engine, table layout model and text protocol for the Portuguese card game Sueca"
requires-python = ">=3.10"
dependencies = []
keywords = ["sueca", "cards", "card game", "trick-taking", "game engine"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["sueca"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
