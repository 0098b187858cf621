[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "teacup"
version = "0.1.0"
description = "Terminal user interface building blocks: key, mouse and focus input decoding, terminal control messages, ANSI helpers, file logging and foreground process execution."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["terminal", "tui", "ansi", "keyboard", "mouse", "escape-sequences"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["teacup"]

[tool.pytest.ini_options]
addopts = "-ra"
