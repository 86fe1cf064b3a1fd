[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cardschema"
version = "0.1.0"
description = "Tools for Adaptive Cards typed schemas: loading, class relationships, naming, enum descriptions, plus masked RGBA drawing and layout tree printing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "adaptive-cards",
    "typed-schema",
    "code-generation",
    "schema",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cardschema"]

[tool.pytest.ini_options]
addopts = "-ra"
