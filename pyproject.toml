[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "liwengine"
version = "0.1.0"
description = "Core pieces of a small game engine: input devices, text output, debug printing, mesh data, images, materials and asset management."
requires-python = ">=3.10"
keywords = ["game-engine", "input", "keyboard", "mouse", "mesh", "assets", "materials"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["liwengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
