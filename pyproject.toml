[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "petpatter"
version = "1.0.0"
description = "Create dogs and cats, then pat them and read what they say."
requires-python = ">=3.10"
dependencies = []
keywords = ["pets", "console", "demo"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
petpatter = "petpatter.app:main"

[tool.hatch.build.targets.wheel]
packages = ["petpatter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
