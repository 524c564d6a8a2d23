[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "facecnn"
version = "0.1.0"
description = "Face image preprocessing, safetensors weight storage and an AdamW optimiser built on NumPy"
requires-python = ">=3.10"
keywords = ["image classification", "numpy", "faces", "preprocessing", "safetensors", "adamw"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Recognition",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["facecnn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
