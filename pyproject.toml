[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelcraft"
version = "0.1.0"
description = "A small pixel-art editor with a zoomable drawing canvas"
requires-python = ">=3.10"
dependencies = []
keywords = ["pixel art", "sprite", "editor", "canvas", "raster", "tkinter"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
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
pixelcraft = "pixelcraft.main_window:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelcraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
