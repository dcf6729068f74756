[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdfview"
version = "0.1.0"
description = "Wireframe viewer for height maps, with isometric and parallel projections"
requires-python = ">=3.10"
keywords = ["wireframe", "height map", "isometric", "projection", "bresenham", "xpm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Multimedia :: Graphics :: Viewers",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fdfview = "fdfview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fdfview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
