"""Elasto-plastic material laws written on a plastic natural state ``B_K``.

The deformation gradient ``F`` is ``I + grad_u``. The plastic state enters
through the symmetric tensor ``B_K`` (identity when omitted), with
``J_K = 1 / sqrt(det B_K)``.

Each law gives the first Piola-Kirchhoff stress, a stored energy density and
the directional derivative of the stress along an increment ``H`` of ``F``.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from .elastic import (
    _holmes_mow_first_piola,
    _holmes_mow_jacobian,
    _holmes_mow_terms,
    _neo_first_piola,
    _neo_jacobian,
    _svk_first_piola,
    _svk_jacobian,
    _tensor,
    _tr,
)

__all__ = [
    "ElastoPlasticState",
    "ElastoPlasticMaterial",
    "DeSaintVenantPlastic",
    "NeoHookeanPlastic",
    "HolmesMowPlastic",
]

_IDENTITY = np.eye(3)


def _natural_state(B_K) -> tuple[np.ndarray, float]:
    """Return ``B_K`` as an array together with ``J_K = 1 / sqrt(det B_K)``."""
    B = _IDENTITY if B_K is None else _tensor(B_K)
    det = float(np.linalg.det(B))
    if det <= 0.0:
        raise ValueError("B_K must have a positive determinant")
    return B, 1.0 / math.sqrt(det)


@dataclass(frozen=True)
class ElastoPlasticState:
    """Quantities stored at a quadrature point after an evaluation."""

    F: np.ndarray
    J: float
    P: np.ndarray
    psi: float


class ElastoPlasticMaterial(ABC):
    """A material law on a deformation gradient and a plastic state ``B_K``."""

    @abstractmethod
    def first_piola(self, F, B_K=None) -> np.ndarray:
        """First Piola-Kirchhoff stress."""

    @abstractmethod
    def energy(self, F, B_K=None) -> float:
        """Stored energy density."""

    @abstractmethod
    def jacobian(self, F, H, B_K=None) -> np.ndarray:
        """Derivative of :meth:`first_piola` at ``F`` in the direction ``H``."""

    def evaluate(self, grad_u, B_K=None) -> ElastoPlasticState:
        """Deformation gradient, its determinant, stress and energy for ``grad_u``."""
        F = _IDENTITY + _tensor(grad_u)
        return ElastoPlasticState(
            F=F,
            J=float(np.linalg.det(F)),
            P=self.first_piola(F, B_K),
            psi=self.energy(F, B_K),
        )


@dataclass(frozen=True)
class DeSaintVenantPlastic(ElastoPlasticMaterial):
    """Saint Venant-Kirchhoff law relative to the plastic state."""

    mu: float
    lam: float

    def first_piola(self, F, B_K=None) -> np.ndarray:
        return _svk_first_piola(self.mu, self.lam, _tensor(F), *_natural_state(B_K))

    def energy(self, F, B_K=None) -> float:
        B, J_K = _natural_state(B_K)
        F = _tensor(F)
        BC = B @ F.T @ F
        tr_BC = _tr(BC)
        return J_K * (
            self.lam / 8.0 * (tr_BC - 3) ** 2
            + self.mu / 4.0 * (_tr(BC @ BC) - 2 * tr_BC - 3)
        )

    def jacobian(self, F, H, B_K=None) -> np.ndarray:
        return _svk_jacobian(
            self.mu, self.lam, _tensor(F), *_natural_state(B_K), _tensor(H)
        )


@dataclass(frozen=True)
class NeoHookeanPlastic(ElastoPlasticMaterial):
    """Compressible neo-Hookean law relative to the plastic state.

    The energy raises ``ValueError`` when ``det F <= 0``.
    """

    mu: float
    lam: float

    def first_piola(self, F, B_K=None) -> np.ndarray:
        return _neo_first_piola(self.mu, self.lam, _tensor(F), *_natural_state(B_K))

    def energy(self, F, B_K=None) -> float:
        B, J_K = _natural_state(B_K)
        F = _tensor(F)
        ratio = float(np.linalg.det(F)) / J_K
        return self.mu / 2.0 * (
            _tr(B @ F.T @ F) - 3 - 2 * math.log(ratio)
        ) + self.lam / 2.0 * (ratio - 1) ** 2

    def jacobian(self, F, H, B_K=None) -> np.ndarray:
        return _neo_jacobian(
            self.mu, self.lam, _tensor(F), *_natural_state(B_K), _tensor(H)
        )


@dataclass(frozen=True)
class HolmesMowPlastic(ElastoPlasticMaterial):
    """Holmes-Mow exponential law relative to the plastic state."""

    mu: float = 1.0
    lam: float = 1.0

    def first_piola(self, F, B_K=None) -> np.ndarray:
        return _holmes_mow_first_piola(
            self.mu, self.lam, _tensor(F), *_natural_state(B_K)
        )

    def energy(self, F, B_K=None) -> float:
        terms = _holmes_mow_terms(self.mu, self.lam, _tensor(F), *_natural_state(B_K))
        return terms.alpha0 * (math.exp(terms.exponent) - 1)

    def jacobian(self, F, H, B_K=None) -> np.ndarray:
        return _holmes_mow_jacobian(
            self.mu, self.lam, _tensor(F), *_natural_state(B_K), _tensor(H)
        )