[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ectimport"
version = "1.0.0"
description = "CSV line splitting and anchor-based layout helpers for resizable bookkeeping import dialogs"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "import", "bookkeeping", "accounting", "layout", "resizable"]
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
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ectimport"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
