[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terrain"
version = "0.1.0"
description = "Procedural terrain building blocks: coherent noise kernels, domain warping, OBJ model loading and a keyboard-driven camera."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["noise", "perlin", "cellular", "worley", "value-noise", "domain-warp", "obj", "camera", "terrain"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["terrain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
