[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dailyhelper"
version = "0.1.0"
description = "A Telegram bot that keeps a reading list of links and hands them back at random"
requires-python = ">=3.10"
dependencies = []
keywords = ["telegram", "bot", "reading-list", "bookmarks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dailyhelper = "dailyhelper.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dailyhelper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
