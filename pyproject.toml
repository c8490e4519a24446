[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "conserva"
version = "1.0.0"
description = "A command line first pomodoro timer"
requires-python = ">=3.10"
dependencies = []
keywords = ["pomodoro", "timer", "productivity", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
conserva = "conserva.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["conserva"]

[tool.pytest.ini_options]
addopts = "-ra"
