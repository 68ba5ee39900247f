[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "owlmech"
version = "0.1.0"
description = "Pointwise hyperelastic and elasto-plastic laws, microstructure updates and obstacle contact terms for finite-strain solid mechanics"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "continuum mechanics",
    "finite strain",
    "hyperelasticity",
    "plasticity",
    "neo-hookean",
    "saint venant-kirchhoff",
    "holmes-mow",
    "obstacle contact",
    "lagrange multiplier",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
]

[tool.hatch.build.targets.wheel]
packages = ["owlmech"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
