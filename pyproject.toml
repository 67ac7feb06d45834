[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fishpop"
version = "0.1.0"
description = "Seeded fish population simulation and procedural lake topography maps"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "population", "perlin", "noise", "topography", "procedural"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fishpop = "fishpop.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fishpop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
