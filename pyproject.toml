[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sigtalk"
version = "0.1.0"
description = "Send text between processes one bit at a time using SIGUSR1 and SIGUSR2"
requires-python = ">=3.10"
dependencies = []
keywords = ["signals", "ipc", "sigusr1", "sigusr2", "messaging"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sigtalk-server = "sigtalk.server:main"
sigtalk-client = "sigtalk.client:main"

[tool.hatch.build.targets.wheel]
packages = ["sigtalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
