[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "perfectform"
version = "0.1.0"
description = "A small arcade game about a pulsing cell that moves around and fires drifting attacks"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "pygame", "cell"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
perfectform = "perfectform.app:main"

[tool.hatch.build.targets.wheel]
packages = ["perfectform"]

[tool.pytest.ini_options]
addopts = "-ra"
