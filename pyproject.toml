[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "torusworld"
version = "0.1.0"
description = "Procedural noise, fractal Brownian motion, heightmap storage, camera controllers and heightmapped torus meshes."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["noise", "perlin", "simplex", "value-noise", "fbm", "torus", "heightmap", "mesh", "procedural", "terrain"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["torusworld"]

[tool.pytest.ini_options]
addopts = "-ra"
