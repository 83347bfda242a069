[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmicalc"
version = "1.2.1"
description = "Body mass index calculator with WHO and DGE weight classifications"
requires-python = ">=3.10"
dependencies = []
keywords = ["bmi", "body mass index", "health", "who", "dge", "calculator"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bmicalc = "bmicalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bmicalc"]

[tool.pytest.ini_options]
addopts = "-ra"
