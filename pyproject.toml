[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simple_slam"
version = "0.1.0"
description = "Building blocks for a modular SLAM pipeline: thread-safe data blocks, a data manager, module scaffolding, an IMU mean estimate and a module graph drawn with Pillow."
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = ["slam", "imu", "lidar", "data-management", "graph", "visualization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
simple-slam-graph-demo = "simple_slam.app:main"

[tool.hatch.build.targets.wheel]
packages = ["simple_slam"]

[tool.pytest.ini_options]
addopts = "-ra"
