[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ossim"
version = "0.1.0"
description = "Small simulators for classic operating-system algorithms: CPU scheduling, memory allocation, disk scheduling and deadlock avoidance"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "round robin",
    "priority scheduling",
    "banker's algorithm",
    "disk scheduling",
    "memory allocation",
    "gantt chart",
    "simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ossim-scheduling = "ossim.scheduling:main"
ossim-priority = "ossim.priority:main"
ossim-memory = "ossim.memory:main"
ossim-disk = "ossim.disk:main"
ossim-banker = "ossim.banker:main"
ossim-pipeline = "ossim.pipeline:main"
ossim-listdir = "ossim.listdir:main"

[tool.hatch.build.targets.wheel]
packages = ["ossim"]

[tool.hatch.build.targets.sdist]
include = ["ossim", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
