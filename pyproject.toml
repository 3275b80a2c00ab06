[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glyn"
version = "0.0.1"
description = "Value types for an ECMAScript interpreter and Unicode identifier classification"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecmascript", "javascript", "interpreter", "unicode", "identifiers", "id_start", "id_continue"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
glyn-generate-unicode = "glyn.generate:main"

[tool.hatch.build.targets.wheel]
packages = ["glyn"]

[tool.pytest.ini_options]
addopts = "-ra"
