[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "convexhull"
version = "0.1.0"
description = "Convex hull and hull area of 2D points, with console and TCP front ends"
requires-python = ">=3.10"
dependencies = []
keywords = ["convex hull", "graham scan", "geometry", "polygon area"]
classifiers = [
    "Development Status :: 4 - Beta",
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
convexhull-prompt = "convexhull.prompt:main"
convexhull-compare = "convexhull.compare:main"
convexhull-interactive = "convexhull.interactive:main"
convexhull-server = "convexhull.server:main"

[tool.hatch.build.targets.wheel]
packages = ["convexhull"]

[tool.pytest.ini_options]
addopts = "-ra"
