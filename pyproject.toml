[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reilgraph"
version = "0.1.0"
description = "Native and REIL-level control flow graphs, memory images and AArch64 function discovery"
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = ["disassembler", "control-flow-graph", "aarch64", "reil", "binary-analysis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Disassemblers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["reilgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
