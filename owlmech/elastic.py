"""Hyperelastic and linear elastic material laws with an optional microstructure tensor.

Every model works on the 3x3 displacement gradient ``grad_u`` at a quadrature
point. The deformation gradient is ``F = I + grad_u``. The optional
microstructure tensor ``K`` (identity when omitted) defines the natural
configuration through ``B_K = (K^T K)^-1`` and ``J_K = det K``.

``stress`` returns the first Piola-Kirchhoff stress. ``jacobian`` returns its
directional derivative along an increment ``H`` of the displacement gradient.

The constitutive kernels below take ``(mu, lam, F, B_K, J_K)`` and are shared
with the elasto-plastic laws, which supply ``B_K`` and ``J_K`` differently.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import NamedTuple, Optional, Sequence

import numpy as np

__all__ = [
    "displacement_gradient",
    "ElasticMaterial",
    "LinearElasticity",
    "DeSaintVenant",
    "NeoHookean",
    "NeoHookeanCOMSOL",
    "HolmesMow",
]

_IDENTITY = np.eye(3)


def displacement_gradient(
    grad_x: Sequence[float],
    grad_y: Sequence[float],
    grad_z: Optional[Sequence[float]] = None,
) -> np.ndarray:
    """Stack the gradients of the three displacement components into a 3x3 tensor.

    Row ``i`` holds the gradient of displacement component ``i``. A missing
    ``grad_z`` (two-dimensional problems) is taken as zero.
    """
    rows = [grad_x, grad_y, (0.0, 0.0, 0.0) if grad_z is None else grad_z]
    tensor = np.array([np.asarray(row, dtype=float) for row in rows], dtype=float)
    if tensor.shape != (3, 3):
        raise ValueError("each gradient must have exactly three components")
    return tensor


def _tensor(value) -> np.ndarray:
    array = np.asarray(value, dtype=float)
    if array.shape != (3, 3):
        raise ValueError(f"expected a 3x3 tensor, got shape {array.shape}")
    return array


def _tr(a: np.ndarray) -> float:
    """Sum of the diagonal entries of a square tensor."""
    return float(np.diagonal(a).sum())


def _contract(a: np.ndarray, b: np.ndarray) -> float:
    """Double contraction ``a : b``."""
    return float(np.sum(a * b))


# --- Saint Venant-Kirchhoff -------------------------------------------------


def _svk_second_piola(mu, lam, C, B, J_K) -> np.ndarray:
    return J_K * (2 * mu * (B @ C @ B - B) + lam * (_tr(B @ C) - 3) * B)


def _svk_first_piola(mu, lam, F, B, J_K) -> np.ndarray:
    return F @ _svk_second_piola(mu, lam, F.T @ F, B, J_K)


def _svk_jacobian(mu, lam, F, B, J_K, H) -> np.ndarray:
    S = _svk_second_piola(mu, lam, F.T @ F, B, J_K)
    C_H = F.T @ H + H.T @ F
    S_H = 2 * J_K * (mu * B @ C_H @ B + lam / 2.0 * _tr(C_H @ B) * B)
    return H @ S + F @ S_H


# --- Neo-Hookean with quadratic volumetric term -----------------------------


def _neo_volumetric(mu, lam, J, J_K) -> float:
    return lam / J_K * J * (J - J_K) - mu * J_K


def _neo_first_piola(mu, lam, F, B, J_K) -> np.ndarray:
    F_inv_T = np.linalg.inv(F).T
    J = float(np.linalg.det(F))
    return mu * J_K * F @ B + _neo_volumetric(mu, lam, J, J_K) * F_inv_T


def _neo_jacobian(mu, lam, F, B, J_K, H) -> np.ndarray:
    F_inv = np.linalg.inv(F)
    F_inv_T = F_inv.T
    J = float(np.linalg.det(F))
    return (
        mu * J_K * H @ B
        + lam / J_K * (2 * J - J_K) * J * _contract(F_inv_T, H) * F_inv_T
        - _neo_volumetric(mu, lam, J, J_K) * (F_inv @ H @ F_inv).T
    )


# --- Holmes-Mow -------------------------------------------------------------


class _HolmesMowTerms(NamedTuple):
    alpha0: float
    alpha1: float
    alpha2: float
    alpha3: float
    I1: float
    exponent: float
    CB: np.ndarray


def _holmes_mow_terms(mu, lam, F, B, J_K) -> _HolmesMowTerms:
    denom = 2 * mu + lam
    alpha0 = denom / 4
    alpha1 = (2 * mu - lam) / denom
    alpha2 = lam / denom
    alpha3 = 1.0
    CB = F.T @ F @ B
    J = float(np.linalg.det(F))
    I1 = _tr(CB)
    I2 = 0.5 * (I1 * I1 - _tr(CB @ CB))
    I3 = (J * J) / (J_K * J_K)
    exponent = alpha1 * (I1 - 3) + alpha2 * (I2 - 3) - alpha3 * math.log(I3)
    return _HolmesMowTerms(alpha0, alpha1, alpha2, alpha3, I1, exponent, CB)


def _holmes_mow_first_piola(mu, lam, F, B, J_K) -> np.ndarray:
    a0, a1, a2, a3, I1, exponent, CB = _holmes_mow_terms(mu, lam, F, B, J_K)
    F_inv_T = np.linalg.inv(F).T
    return 2 * a0 * J_K * math.exp(exponent) * (
        (a1 + a2 * I1) * F @ B - a2 * F @ B @ CB - a3 * F_inv_T
    )


def _holmes_mow_jacobian(mu, lam, F, B, J_K, H) -> np.ndarray:
    a0, a1, a2, a3, I1, exponent, CB = _holmes_mow_terms(mu, lam, F, B, J_K)
    F_inv = np.linalg.inv(F)
    F_inv_T = F_inv.T
    C_inv = np.linalg.inv(F.T @ F)
    FB = F @ B
    D = (F.T @ H + H.T @ F) / 2.0
    scale = 2 * a0 * J_K * math.exp(exponent)

    S = scale * ((a1 + a2 * I1) * B - a2 * B @ CB - a3 * C_inv)
    d_exponent = 2 * _contract((a1 + a2 * I1) * FB - a3 * F_inv_T, H) - (
        2 * a2 * _contract(CB @ D, B)
    )
    return (H + d_exponent * F) @ S + scale * (
        2 * a2 * _contract(FB, H) * FB
        - 2 * a2 * FB @ D @ B
        + a3 * (H @ F_inv + F_inv_T @ H.T) @ F_inv_T
    )


# --- Materials ---------------------------------------------------------------


def _state(grad_u, K) -> tuple[np.ndarray, np.ndarray, float]:
    """Deformation gradient, ``B_K`` and ``J_K`` for a displacement gradient."""
    F = _IDENTITY + _tensor(grad_u)
    K = _IDENTITY if K is None else _tensor(K)
    return F, np.linalg.inv(K.T @ K), float(np.linalg.det(K))


class ElasticMaterial(ABC):
    """A material law giving stress and its linearisation from the displacement gradient."""

    @abstractmethod
    def stress(self, grad_u, K=None) -> np.ndarray:
        """First Piola-Kirchhoff stress for the displacement gradient ``grad_u``."""

    @abstractmethod
    def jacobian(self, grad_u, H, K=None) -> np.ndarray:
        """Derivative of :meth:`stress` at ``grad_u`` in the direction ``H``."""


@dataclass(frozen=True)
class LinearElasticity(ElasticMaterial):
    """Small-strain isotropic linear elasticity; the microstructure is ignored."""

    mu: float = 1.0
    lam: float = 1.0

    def _sigma(self, gradient) -> np.ndarray:
        gradient = _tensor(gradient)
        eps = (gradient + gradient.T) / 2.0
        return 2 * self.mu * eps + self.lam * _tr(eps) * _IDENTITY

    def stress(self, grad_u, K=None) -> np.ndarray:
        return self._sigma(grad_u)

    def jacobian(self, grad_u, H, K=None) -> np.ndarray:
        return self._sigma(H)


@dataclass(frozen=True)
class DeSaintVenant(ElasticMaterial):
    """Saint Venant-Kirchhoff material relative to the natural state given by ``K``."""

    mu: float = 1.0
    lam: float = 1.0

    def stress(self, grad_u, K=None) -> np.ndarray:
        return _svk_first_piola(self.mu, self.lam, *_state(grad_u, K))

    def jacobian(self, grad_u, H, K=None) -> np.ndarray:
        return _svk_jacobian(self.mu, self.lam, *_state(grad_u, K), _tensor(H))


@dataclass(frozen=True)
class NeoHookean(ElasticMaterial):
    """Compressible neo-Hookean material with a quadratic volumetric term."""

    mu: float = 1.0
    lam: float = 1.0

    def stress(self, grad_u, K=None) -> np.ndarray:
        return _neo_first_piola(self.mu, self.lam, *_state(grad_u, K))

    def jacobian(self, grad_u, H, K=None) -> np.ndarray:
        return _neo_jacobian(self.mu, self.lam, *_state(grad_u, K), _tensor(H))


@dataclass(frozen=True)
class NeoHookeanCOMSOL(ElasticMaterial):
    """Neo-Hookean material with a logarithmic volumetric term.

    Raises ``ValueError`` when the deformation inverts an element (``det F <= 0``).
    """

    mu: float = 1.0
    lam: float = 1.0

    def _volumetric(self, J: float, J_K: float) -> float:
        return self.lam * J * (math.log(J) - math.log(J_K)) - self.mu * J_K

    def stress(self, grad_u, K=None) -> np.ndarray:
        F, B, J_K = _state(grad_u, K)
        J = float(np.linalg.det(F))
        return self.mu * J_K * F @ B + self._volumetric(J, J_K) * np.linalg.inv(F).T

    def jacobian(self, grad_u, H, K=None) -> np.ndarray:
        F, B, J_K = _state(grad_u, K)
        H = _tensor(H)
        F_inv = np.linalg.inv(F)
        F_inv_T = F_inv.T
        J = float(np.linalg.det(F))
        log_ratio = math.log(J) - math.log(J_K)
        return (
            self.mu * J_K * H @ B
            + self.lam * J * (log_ratio + 1) * _contract(F_inv_T, H) * F_inv_T
            - self._volumetric(J, J_K) * (F_inv @ H @ F_inv).T
        )


@dataclass(frozen=True)
class HolmesMow(ElasticMaterial):
    """Holmes-Mow exponential hyperelastic material."""

    mu: float = 1.0
    lam: float = 1.0

    def stress(self, grad_u, K=None) -> np.ndarray:
        return _holmes_mow_first_piola(self.mu, self.lam, *_state(grad_u, K))

    def jacobian(self, grad_u, H, K=None) -> np.ndarray:
        return _holmes_mow_jacobian(self.mu, self.lam, *_state(grad_u, K), _tensor(H))