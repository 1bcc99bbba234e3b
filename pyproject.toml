[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fauxgen"
version = "0.1.0"
description = "Fake data for tests: colours, blood types, cars, crypto addresses, hashes, address parts and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["fake", "fake-data", "test-data", "generator", "fixtures"]
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
    "Topic :: Software Development :: Testing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fauxgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
