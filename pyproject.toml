[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyds"
version = "0.1.0"
description = "Small classic data structures: a singly linked list, a bounded array queue and a bounded array stack."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "queue", "stack"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyds-list-demo = "tinyds.linked_list:main"
tinyds-queue-demo = "tinyds.array_queue:main"
tinyds-stack-demo = "tinyds.array_stack:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
