[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termcli"
version = "0.1.0"
description = "Building blocks for interactive command line interfaces: line splitting, typed argument conversion, key decoding, colours and telnet stream handling."
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "command line", "terminal", "telnet", "keyboard", "prompt"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["termcli"]

[tool.pytest.ini_options]
addopts = "-ra"
