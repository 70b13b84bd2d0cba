[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rbxtypes"
version = "0.1.0"
description = "Value types for Roblox instances, with JSON conversion and a binary codec for instance attributes."
requires-python = ">=3.10"
dependencies = []
keywords = ["roblox", "attributes", "serialization", "types", "brickcolor"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rbxtypes"]

[tool.pytest.ini_options]
addopts = "-ra"
