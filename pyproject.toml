[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rotinterp"
version = "0.1.0"
description = "Compare Euler-angle, linear and spherical quaternion interpolation of a 3D pose"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "quaternion",
    "slerp",
    "nlerp",
    "euler angles",
    "interpolation",
    "rotation",
    "3d",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rotinterp = "rotinterp.session:main"

[tool.hatch.build.targets.wheel]
packages = ["rotinterp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
