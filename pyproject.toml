[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trainlog"
version = "0.1.0"
description = "A console training diary with statistics, plus small number and word list tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["training", "diary", "statistics", "queue", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Czech",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trainlog = "trainlog.app:main"
trainlog-reverse = "trainlog.reverse:main"
trainlog-tail = "trainlog.tail:main"
trainlog-capitals = "trainlog.capitals:main"
trainlog-zoo = "trainlog.zoo:main"

[tool.hatch.build.targets.wheel]
packages = ["trainlog"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
