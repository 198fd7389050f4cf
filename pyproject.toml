[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paintshapes"
version = "0.1.0"
description = "A small paint program with freehand drawing, shapes, selection, layering and RGB colour controls"
requires-python = ">=3.10"
dependencies = []
keywords = ["paint", "drawing", "shapes", "scribble", "tkinter", "canvas"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
paintshapes = "paintshapes.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["paintshapes"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
