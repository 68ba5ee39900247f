"""Microstructure tensors: prescribed by functions, or evolved by growth laws."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Mapping, NamedTuple, Sequence

import numpy as np

from .elastic import _contract, _tensor

__all__ = [
    "FunctionMicrostructure",
    "Microstructure",
    "GradeOneGrowth",
    "GradeZeroExplicit",
]

_IDENTITY = np.eye(3)
_NORM_THRESHOLD = 1e-6

ComponentFunction = Callable[[float, Sequence[float]], float]


class MicrostructureValue(NamedTuple):
    """A microstructure tensor ``K`` and ``B_K = K^T K``."""

    K: np.ndarray
    B_K: np.ndarray


class GrowthState(NamedTuple):
    """Plastic state ``B_K`` and the matching ``det K = 1 / sqrt(det B_K)``."""

    B_K: np.ndarray
    det_K: float


def _constant(value: float) -> ComponentFunction:
    return lambda t, point: value


@dataclass(frozen=True)
class FunctionMicrostructure:
    """A tensor ``K`` whose entries are functions of time and position.

    ``entries`` maps ``(row, column)`` to a callable ``f(t, point)``; entries
    not given default to the identity.
    """

    entries: Mapping[tuple[int, int], ComponentFunction] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for key in self.entries:
            if not (
                isinstance(key, tuple)
                and len(key) == 2
                and all(isinstance(index, int) and 0 <= index < 3 for index in key)
            ):
                raise ValueError(f"invalid tensor entry {key!r}")

    def _function(self, i: int, j: int) -> ComponentFunction:
        return self.entries.get((i, j), _constant(1.0 if i == j else 0.0))

    def evaluate(self, t: float, point: Sequence[float]) -> MicrostructureValue:
        """``K`` and ``K^T K`` at time ``t`` and position ``point``."""
        K = np.array(
            [[float(self._function(i, j)(t, point)) for j in range(3)] for i in range(3)]
        )
        return MicrostructureValue(K, K.T @ K)


@dataclass(frozen=True)
class Microstructure:
    """Parameters shared by the plastic growth laws."""

    lambda_p: float
    sigma_y: float = 0.0


def _isotropic(jk: float) -> np.ndarray:
    if jk <= 0.0:
        raise ValueError("J_k must be positive")
    return jk ** (-2.0 / 3.0) * _IDENTITY


@dataclass(frozen=True)
class GradeOneGrowth(Microstructure):
    """Isotropic growth ``B_K = J_k^(-2/3) I`` driven by the order parameter ``J_k``."""

    is_explicit: bool = True

    def initial(self, jk: float) -> np.ndarray:
        """Plastic state at the start of the simulation."""
        return _isotropic(jk)

    def update(self, jk: float, jk_old: float) -> np.ndarray:
        """Plastic state from the previous value (explicit) or the current one."""
        return _isotropic(jk_old if self.is_explicit else jk)


def _deviator(tensor: np.ndarray) -> np.ndarray:
    mean = float(tensor.diagonal().sum()) / 3.0
    return tensor - mean * _IDENTITY


@dataclass(frozen=True)
class GradeZeroExplicit(Microstructure):
    """Explicit plastic flow of ``B_K`` driven by the deviatoric stress."""

    def initial(self) -> GrowthState:
        """Stress-free initial plastic state."""
        return GrowthState(_IDENTITY.copy(), 1.0)

    def update(self, B_K_old, F_old, P_old, dt: float) -> GrowthState:
        """Advance ``B_K`` over a time step using the previous step's ``F`` and ``P``."""
        B_K_old = _tensor(B_K_old)
        F = _tensor(F_old)
        P = _tensor(P_old)
        J = float(np.linalg.det(F))
        if J == 0.0:
            raise ValueError("deformation gradient is singular")

        sigma = (P @ F.T) / J
        mandel = F.T @ P
        dev_sigma = _deviator(sigma)
        dev_mandel = _deviator(mandel)

        norm = math.sqrt(_contract(dev_sigma, dev_sigma))
        if norm > _NORM_THRESHOLD:
            excess = norm - math.sqrt(2.0 / 3.0) * self.sigma_y
            gamma_p = self.lambda_p / norm * (excess + abs(excess))
        else:
            gamma_p = 0.0

        A = _IDENTITY + gamma_p * dt * dev_mandel
        B_K = B_K_old @ np.linalg.inv(A)
        return GrowthState(B_K, 1.0 / math.sqrt(float(np.linalg.det(B_K))))