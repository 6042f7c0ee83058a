[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "staffroll"
version = "0.1.0"
description = "A small interactive staff roster kept in a plain text file"
requires-python = ">=3.10"
dependencies = []
keywords = ["employees", "roster", "staff", "workforce", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
staffroll = "staffroll.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["staffroll"]

[tool.pytest.ini_options]
addopts = "-ra"
