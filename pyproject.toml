[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pwpulse"
version = "0.1.0"
description = "Sample specifications, volumes, property lists, time values and a small JSON parser for sound-server clients"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "volume", "sample-spec", "proplist", "json", "utf-8", "timeval"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pwpulse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
