[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "battlefactory"
version = "0.1.0"
description = "Gen III style battle mechanics: stat stages, damage, drain, type chart, hazards and a PCG32 generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["battle", "turn-based", "game", "mechanics", "pcg32", "type-chart"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["battlefactory"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
