[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ipfilter"
version = "0.0.1"
description = "Parse, sort and filter lists of IPv4 addresses from tab-separated logs"
requires-python = ">=3.10"
dependencies = []
keywords = ["ip", "ipv4", "filter", "tsv", "log"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Log Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ip-filter = "ipfilter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ipfilter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
