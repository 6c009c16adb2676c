[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hilbertprove"
version = "0.1.0"
description = "A small backward-chaining prover for Hilbert-style propositional logic"
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "propositional logic", "hilbert system", "theorem proving", "modus ponens"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hilbertprove = "hilbertprove.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hilbertprove"]

[tool.pytest.ini_options]
addopts = "-ra"
