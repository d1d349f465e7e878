[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "envloader"
version = "0.1.0"
description = "Parse .env file lines, with quoting, escapes and variable substitution"
requires-python = ">=3.10"
dependencies = []
keywords = ["dotenv", "env", "environment", "configuration", "parser"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["envloader"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
