[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "guidefines"
version = "0.1.0"
description = "Read, generate and write #define tables and style-flag JSON files for GUI layout editing"
requires-python = ">=3.10"
dependencies = []
keywords = ["defines", "flags", "gui", "layout", "header", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["guidefines"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
