[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algori"
version = "0.1.0"
description = "Classic algorithms and data structures: sorting, searching, subarrays, matrices, DFT and logic-gate circuits"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "sorting", "searching", "data-structures", "logic-gates", "dft", "matrix"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algori"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
