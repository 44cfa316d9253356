[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sztest"
version = "0.1.0"
description = "Test helpers: marked-up diffs of strings and sequences, range checks, a failure-collecting checker and a controllable test clock."
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "diff", "assertions", "test-clock", "unit-test"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing :: Unit",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sztest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
