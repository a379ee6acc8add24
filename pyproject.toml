[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raugext"
version = "0.1.0"
description = "Per-sample signal processors for audio: math, control, dynamics, oscillators, envelopes, sample playback and value utilities"
requires-python = ">=3.10"
keywords = ["audio", "dsp", "synthesis", "oscillator", "envelope", "limiter", "wav"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["raugext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
