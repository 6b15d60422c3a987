[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "e57pages"
version = "0.1.0"
description = "Checksummed page I/O and point post-processing for E57 point cloud files."
requires-python = ">=3.10"
dependencies = []
keywords = ["e57", "lidar", "pointclouds", "laserscanning", "geospatial", "crc32c"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["e57pages"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
