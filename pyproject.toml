[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gen3trade"
version = "0.1.0"
description = "Third-generation Pokémon helpers: RNG seed recovery, PID/IV generation, party data encryption, stats, moves and menu options."
requires-python = ">=3.10"
dependencies = []
keywords = ["pokemon", "gen3", "rng", "lcg", "pid", "iv", "save-data"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["gen3trade"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
