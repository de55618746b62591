[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minprintf"
version = "0.1.0"
description = "A small printf with %c %s %d %i %u %x %X %p %%, plus string, memory, character and linked-list helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "formatting", "strings", "linked list", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minprintf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
