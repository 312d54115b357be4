[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smartsales"
version = "2.0.0"
description = "Interactive sales tracker with monthly and yearly summaries stored in plain text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["sales", "tracker", "point-of-sale", "summary", "cli"]
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
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smartsales = "smartsales.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["smartsales"]

[tool.pytest.ini_options]
addopts = "-ra"
