[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "samplerdeck"
version = "1.0.0"
description = "Building blocks for a five-slot sampler: sample slots, parameter smoothing and control-surface logic"
requires-python = ">=3.10"
dependencies = []
keywords = ["sampler", "audio", "sample-slots", "encoder", "synthesis", "ui-logic"]
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
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["samplerdeck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
