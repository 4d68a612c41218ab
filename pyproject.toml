[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dfcommon"
version = "0.1.0"
description = "Readers for Daggerfall configuration, palette, IMG and CIF image files"
requires-python = ">=3.10"
dependencies = []
keywords = ["daggerfall", "game-data", "img", "cif", "palette", "file-formats"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dfcommon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
