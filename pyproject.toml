[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "margen"
version = "1.2.1"
description = "Generate marble-like pattern bitmap images."
requires-python = ">=3.10"
dependencies = []
keywords = ["bitmap", "bmp", "marble", "pattern", "procedural", "generator", "image"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
margen = "margen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["margen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
