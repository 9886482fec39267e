"""Basic measurement records shared by the SLAM components."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def _zero_vector() -> np.ndarray:
    return np.zeros(3, dtype=float)


def _identity() -> np.ndarray:
    return np.eye(3, dtype=float)


@dataclass
class Pose6D:
    """An IMU sample together with the state obtained by integrating it.

    ``acc`` and ``gyr`` are the measured linear acceleration and angular
    velocity; ``vel``, ``pos`` and ``rot`` hold the integrated velocity,
    position and rotation matrix.
    """

    time: float = 0.0
    acc: np.ndarray = field(default_factory=_zero_vector)
    gyr: np.ndarray = field(default_factory=_zero_vector)
    vel: np.ndarray = field(default_factory=_zero_vector)
    pos: np.ndarray = field(default_factory=_zero_vector)
    rot: np.ndarray = field(default_factory=_identity)

    def __post_init__(self) -> None:
        self.time = float(self.time)
        for name in ("acc", "gyr", "vel", "pos"):
            vector = np.array(getattr(self, name), dtype=float).reshape(-1)
            if vector.shape != (3,):
                raise ValueError(f"{name} must have three components")
            setattr(self, name, vector)
        rot = np.array(self.rot, dtype=float)
        if rot.shape != (3, 3):
            raise ValueError("rot must be a 3x3 matrix")
        self.rot = rot


@dataclass
class CTPoint:
    """A single lidar point with its own capture time."""

    timestamp: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    intensity: float = 0.0