[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pctfmt"
version = "0.1.0"
description = "A small percent-style formatter with c, s, d, i, u, x, X, p conversions and the #, space and + flags"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "format", "formatting", "string", "hex"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pctfmt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
