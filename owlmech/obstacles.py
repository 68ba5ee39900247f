"""Rigid obstacles described by a gap function ``g(x, y, z, t)``.

By convention a point is admissible where ``g >= 0``. It is in contact where
``g = 0`` with a positive multiplier, and it penetrates the obstacle where
``g < 0``. Besides the value, each obstacle gives the spatial gradient and
Hessian of ``g``. The contact kernels use these to build residuals and
Jacobians.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional, Sequence

import numpy as np

__all__ = [
    "CONTACT_TOLERANCE",
    "Component",
    "Obstacle",
    "ParabolicObstacle",
    "CageObstacle2D",
    "circular_gap",
    "ObstacleEvaluation",
    "FunctionObstacle",
]

CONTACT_TOLERANCE = 1e-10
"""Tolerance on the gap and on the multiplier when deciding whether contact is active."""


class Component(IntEnum):
    """Coupled variables of a contact problem: the displacements and the multiplier."""

    X = 0
    Y = 1
    Z = 2
    LAMBDA = 3


class Obstacle(ABC):
    """A gap function with its first and second spatial derivatives."""

    @abstractmethod
    def value(self, x: float, y: float, z: float, t: float) -> float:
        """Gap at position ``(x, y, z)`` and time ``t``."""

    @abstractmethod
    def gradient(self, x: float, y: float, z: float, t: float) -> np.ndarray:
        """Spatial gradient of the gap, a vector of three components."""

    @abstractmethod
    def hessian(self, x: float, y: float, z: float, t: float) -> np.ndarray:
        """Symmetric 3x3 Hessian of the gap."""


def _symmetric(xx, xy, xz, yy, yz, zz) -> np.ndarray:
    return np.array(
        [[xx, xy, xz], [xy, yy, yz], [xz, yz, zz]],
        dtype=float,
    )


@dataclass(frozen=True)
class ParabolicObstacle(Obstacle):
    """A parabola ``y = 1 + 4 (x - 0.5)^2`` that moves down and up again in time.

    The parabola descends at rate 0.05 until ``t = 6.95``. It holds at depth 0.35
    until ``t = 24.95`` and rises again at rate 0.05 afterwards. At the
    switching instants themselves the time offset is zero.
    """

    def _offset(self, t: float) -> float:
        return (
            -0.05 * t * (t < 6.95)
            - 0.35 * ((t > 6.95) and (t < 24.95))
            + (0.05 * (t - 25) - 0.35) * (t > 24.95)
        )

    def value(self, x, y, z, t) -> float:
        return 4 * (x - 0.5) * (x - 0.5) + self._offset(t) + 1 - y

    def gradient(self, x, y, z, t) -> np.ndarray:
        return np.array([8 * (x - 0.5), -1.0, 0.0])

    def hessian(self, x, y, z, t) -> np.ndarray:
        return _symmetric(8.0, 0.0, 0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class CageObstacle2D(Obstacle):
    """A planar cage bounded by ``x = -0.2``, ``x = 1.2`` and ``y = 1.2``."""

    def value(self, x, y, z, t) -> float:
        return (1.2 - y) * (1.2 - x) * (0.2 + x)

    def gradient(self, x, y, z, t) -> np.ndarray:
        return np.array([(1.2 - y) * (-2 * x + 1), -(1.2 - x) * (0.2 + x), 0.0])

    def hessian(self, x, y, z, t) -> np.ndarray:
        return _symmetric(-2 * (1.2 - y), 2 * x - 1, 0.0, 0.0, 0.0, 0.0)


def circular_gap(x: float, y: float, z: float, t: float) -> float:
    """Gap to a circular obstacle that closes in at rate 0.1 per unit time."""
    return -(x * x + y * y - x - 2 * y * (-3 + 1) - 2 * 3 + 1) - 0.1 * t


@dataclass(frozen=True)
class ObstacleEvaluation:
    """Gap, gradient, gradient norm and Hessian at a deformed position."""

    value: float
    gradient: np.ndarray
    gradient_norm: float
    hessian: np.ndarray


PointFunction = Callable[[float, np.ndarray], float]


def _zero(t: float, point: np.ndarray) -> float:
    return 0.0


def _as_vector(values: Optional[Sequence[float]], name: str) -> np.ndarray:
    array = np.zeros(3) if values is None else np.asarray(values, dtype=float).ravel()
    if array.size == 2:
        array = np.append(array, 0.0)
    if array.shape != (3,):
        raise ValueError(f"{name} must have two or three components")
    return array


@dataclass(frozen=True)
class FunctionObstacle:
    """An obstacle given by user functions ``f(t, point)`` of the gap and its derivatives.

    The derivatives along ``z`` default to zero, as suits planar problems.
    """

    g: PointFunction
    gx: PointFunction
    gy: PointFunction
    gxx: PointFunction
    gxy: PointFunction
    gyy: PointFunction
    gz: PointFunction = _zero
    gxz: PointFunction = _zero
    gyz: PointFunction = _zero
    gzz: PointFunction = _zero

    def evaluate(self, t: float, point, displacement=None) -> ObstacleEvaluation:
        """Evaluate at the deformed position ``point + displacement``.

        A missing displacement, or a missing ``z`` component of one, counts as zero.
        """
        chi = _as_vector(point, "point") + _as_vector(displacement, "displacement")
        gradient = np.array(
            [float(self.gx(t, chi)), float(self.gy(t, chi)), float(self.gz(t, chi))]
        )
        hessian = _symmetric(
            float(self.gxx(t, chi)),
            float(self.gxy(t, chi)),
            float(self.gxz(t, chi)),
            float(self.gyy(t, chi)),
            float(self.gyz(t, chi)),
            float(self.gzz(t, chi)),
        )
        return ObstacleEvaluation(
            value=float(self.g(t, chi)),
            gradient=gradient,
            gradient_norm=math.sqrt(float(gradient @ gradient)),
            hessian=hessian,
        )