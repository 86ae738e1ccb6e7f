[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchtrees"
version = "1.0.0"
description = "Ordered key/value maps built on plain and AVL-balanced binary search trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "avl", "balanced tree", "ordered map", "data structures"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
searchtrees = "searchtrees.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["searchtrees"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
