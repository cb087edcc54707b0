[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "falconsniff"
version = "0.1.0"
description = "Building blocks for LTE control-channel sniffing: DCI search-space helpers, grant computations, profiling and broadcast utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["lte", "pdcch", "dci", "sniffer", "pdsch", "pusch", "rnti"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Telecommunications Industry",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["falconsniff"]

[tool.pytest.ini_options]
addopts = "-ra"
