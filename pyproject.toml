[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datagen-client"
version = "0.1.0"
description = "Console client for describing a table and asking a generation service for rows of test data as CSV"
requires-python = ">=3.10"
dependencies = []
keywords = ["test data", "data generation", "csv", "client", "http"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
datagen-client = "datagen_client.app:main"

[tool.hatch.build.targets.wheel]
packages = ["datagen_client"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
