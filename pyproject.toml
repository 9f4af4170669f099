[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "campusnet"
version = "0.1.0"
description = "A small campus social network: user profiles, friendships and friend recommendations from an interactive console."
requires-python = ">=3.10"
dependencies = []
keywords = ["social-network", "graph", "recommendations", "friends", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
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
campusnet = "campusnet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["campusnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
