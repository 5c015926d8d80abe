[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xlwgen"
version = "0.1.0"
description = "Generate spreadsheet add-in registration and wrapper code for described C++ functions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "code generation",
    "spreadsheet",
    "add-in",
    "interface generator",
    "c++",
    "wrappers",
]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xlwgen"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
