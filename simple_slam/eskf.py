"""Pieces of the error-state Kalman filter used for IMU propagation."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from simple_slam.data_types import Pose6D


def imu_mean(samples: Iterable[Pose6D]) -> tuple[np.ndarray, np.ndarray]:
    """Running mean of the measured acceleration and angular velocity.

    Returns ``(mean_acc, mean_gyr)``; both are zero when there are no samples.
    Used to estimate the initial gravity direction and gyroscope bias.
    """
    mean_acc = np.zeros(3, dtype=float)
    mean_gyr = np.zeros(3, dtype=float)
    for count, sample in enumerate(samples, start=1):
        mean_acc += (np.asarray(sample.acc, dtype=float) - mean_acc) / count
        mean_gyr += (np.asarray(sample.gyr, dtype=float) - mean_gyr) / count
    return mean_acc, mean_gyr