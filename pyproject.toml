[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sharing-instant"
version = "0.1.0"
description = "Typed tables, InstaQL query building, sync configuration, topic event buffering and presence rendering for real-time apps"
requires-python = ">=3.10"
dependencies = []
keywords = ["sync", "real-time", "query-builder", "presence", "instaql"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trinity = "sharing_instant.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sharing_instant"]

[tool.pytest.ini_options]
addopts = "-ra"
