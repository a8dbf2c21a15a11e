[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bureaucracy"
version = "1.0.0"
description = "Grade-ranked bureaucrats, forms that must be signed and executed, and an intern who fills them in"
requires-python = ">=3.10"
dependencies = []
keywords = ["bureaucrat", "forms", "workflow", "simulation", "office"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bureaucracy = "bureaucracy.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bureaucracy"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
