[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "immichgo"
version = "0.1.0"
description = "Photo library helpers: media type detection, file name analysis, grouping of bursts, series and RAW/JPEG or HEIC/JPEG pairs, and group filters"
requires-python = ">=3.10"
dependencies = []
keywords = ["photos", "burst", "raw", "jpeg", "heic", "media", "stacking"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["immichgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
