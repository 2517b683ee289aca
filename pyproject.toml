[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "httpkit"
version = "1.3.1"
description = "Types for HTTP versions and request URIs: schemes, authorities, ports, paths and queries."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "uri", "authority", "scheme", "request-target", "version"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
packages = ["httpkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
