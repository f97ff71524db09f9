[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tacalc"
version = "0.7.0"
description = "Streaming technical analysis methods and indicators for price time series."
requires-python = ">=3.10"
dependencies = []
keywords = ["technical", "analysis", "trading", "indicators", "moving-average"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tacalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
