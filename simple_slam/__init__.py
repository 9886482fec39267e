"""Data blocks, a data manager, module scaffolding, an IMU mean and module graph drawing for SLAM pipelines."""

__version__ = "0.1.0"