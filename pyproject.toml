[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jolly"
version = "0.1.0"
description = "Engine building blocks: shortest float formatting, a robin-hood hash table, a JML document model, vector records and UI descriptions."
requires-python = ">=3.10"
dependencies = []
keywords = ["engine", "hash table", "float formatting", "ryu", "jml", "document model"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jolly"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
