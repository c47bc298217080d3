[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "resourcebook"
version = "0.1.0"
description = "A small console manager for a semicolon-separated file of named resources with links and types"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "database", "bookmarks", "resources", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Natural Language :: Spanish",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
resourcebook = "resourcebook.console:main"

[tool.hatch.build.targets.wheel]
packages = ["resourcebook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
