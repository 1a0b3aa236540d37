[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapematch"
version = "0.1.0"
description = "A console puzzle game: fit toys into matching holes by shape, colour and size"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "console", "matching", "shapes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shapematch = "shapematch.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["shapematch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
