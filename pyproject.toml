[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ampcommon"
version = "0.1.0"
description = "Character manifest schema, source-control models with GitHub payload mapping, and file-synchronization events."
requires-python = ">=3.11"
dependencies = []
keywords = ["manifest", "schema", "scm", "github", "kubernetes", "toml"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ampcommon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
strict = true
