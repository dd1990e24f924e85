[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "neurosim"
version = "0.1.0"
description = "Small spiking neural network simulator with metabolic dysfunction scenarios"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "neuron",
    "spiking",
    "simulation",
    "neuroscience",
    "metabolism",
    "hypoglycemia",
    "hypoxia",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
neurosim = "neurosim.simulator:main"

[tool.hatch.build.targets.wheel]
packages = ["neurosim"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
