[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "medibox"
version = "0.1.0"
description = "Medicine reminder box logic: alarms, menus, climate checks, light sampling and shade control"
requires-python = ">=3.10"
dependencies = []
keywords = ["medibox", "alarm", "reminder", "mqtt", "servo", "sensors"]
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
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["medibox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
