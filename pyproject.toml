[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rakusite"
version = "1.0.0"
description = "An interactive personal homepage for the terminal: an intro screen, a topic list, quotes and links"
requires-python = ">=3.10"
keywords = ["tui", "terminal", "homepage", "website", "blessed"]
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
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rakusite = "rakusite.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rakusite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
