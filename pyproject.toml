[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "listkit"
version = "0.1.0"
description = "Small node-based containers: singly and doubly linked lists, a stack, a queue and an ordered linked map."
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "stack", "queue", "map", "data structures"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
listkit = "listkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["listkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
