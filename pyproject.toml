[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dpatterns"
version = "0.1.0"
description = "Dynamic-programming patterns and simple stack, queue and deque containers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dynamic-programming",
    "algorithms",
    "knapsack",
    "bitmask",
    "stack",
    "queue",
    "deque",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
test = ["pytest", "hypothesis"]

[project.scripts]
dpatterns-stack = "dpatterns.stack:main"
dpatterns-queue = "dpatterns.fifo:main"

[tool.hatch.build.targets.wheel]
packages = ["dpatterns"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
