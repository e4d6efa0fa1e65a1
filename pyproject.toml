[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pkgjtool"
version = "0.1.0"
description = "Helpers for handheld game package catalogs: zRIF licence decoding, raw inflate with a preset dictionary, SHA-256/HMAC, file helpers and catalog browsing logic"
requires-python = ">=3.10"
dependencies = []
keywords = ["pkg", "zrif", "inflate", "deflate", "sha256", "hmac", "catalog"]
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
    "Topic :: System :: Archiving :: Packaging",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pkgjtool"]

[tool.pytest.ini_options]
addopts = "-ra"
