[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prealgebra"
version = "0.1.0"
description = "Exact integers, fractions and decimals with rational arithmetic and comparison."
requires-python = ">=3.10"
dependencies = []
keywords = ["fraction", "decimal", "integer", "rational", "arithmetic", "prealgebra"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["prealgebra"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
