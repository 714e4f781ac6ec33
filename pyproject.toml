[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estudos"
version = "0.1.0"
description = "Classic sorting algorithms, a mutable string type, a linked list, a stack and simple 2D scenes exported as SVG"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "algorithms", "linked-list", "stack", "svg", "education"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
estudos-text = "estudos.text:main"
estudos-scenes = "estudos.scenes:main"

[tool.hatch.build.targets.wheel]
packages = ["estudos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
