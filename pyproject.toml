[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "diskmgr"
version = "0.1.0"
description = "Disk, volume and partition records with a binary parcel codec and a disk manager service client"
requires-python = ">=3.10"
dependencies = []
keywords = ["disk", "volume", "partition", "storage", "parcel", "filesystem"]
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
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["diskmgr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
