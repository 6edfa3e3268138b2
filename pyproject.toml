[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridsnatch"
version = "0.1.0"
description = "A small grid-based collect-the-tile arcade game built on an entity-component-system core"
requires-python = ">=3.10"
keywords = ["game", "arcade", "ecs", "pygame", "grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gridsnatch = "gridsnatch.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gridsnatch"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
