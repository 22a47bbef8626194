[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathmux"
version = "1.4.3"
description = "Path and method based request routing for HTTP services, with REST parameters and regex segments"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "rest", "router", "routing", "multiplexer", "url", "middleware"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pathmux"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
