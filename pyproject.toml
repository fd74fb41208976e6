[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "laplace-direct"
version = "0.1.0"
description = "Solve the 3D Laplace equation on a regular grid with a direct sparse solver"
requires-python = ">=3.10"
keywords = ["laplace", "poisson", "sparse", "csr", "direct solver", "finite differences"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
laplace-direct = "laplace_direct.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["laplace_direct"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
