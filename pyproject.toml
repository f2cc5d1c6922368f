[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nakudynamo"
version = "0.1.0"
description = "Download, unpack and run DynamoDB Local with a bundled Java runtime"
requires-python = ">=3.10"
keywords = ["dynamodb", "dynamodb-local", "aws", "local-development", "jre"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: Software Development :: Testing",
]
dependencies = [
    "requests",
    "tqdm",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
nakudynamo = "nakudynamo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nakudynamo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
