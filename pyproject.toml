[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "opencanvas"
version = "0.1.0"
description = "An interactive terminal canvas for drawing, cloning, undoing and exporting simple shapes"
requires-python = ">=3.10"
dependencies = []
keywords = ["canvas", "shapes", "drawing", "undo", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
opencanvas = "opencanvas.app:main"

[tool.hatch.build.targets.wheel]
packages = ["opencanvas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
