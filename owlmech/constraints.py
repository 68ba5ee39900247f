"""Nodal complementarity conditions that tie a contact multiplier to an obstacle.

The kernels act on the equation of the multiplier ``u`` at a mesh node. The
node sits at ``node + displacement`` in the deformed configuration, and ``g``
is evaluated there. Contact is active where the node penetrates the obstacle
(``g < -tol``) or the multiplier is positive (``u > tol``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from .obstacles import CONTACT_TOLERANCE, Component, Obstacle, _as_vector, circular_gap

__all__ = ["ObstacleConstraint", "IdentityNoContact"]

GapFunction = Callable[[float, float, float, float], float]


def _deformed_position(node, displacement) -> np.ndarray:
    """Position of a node after displacement; missing components count as zero."""
    return _as_vector(node, "node") + _as_vector(displacement, "displacement")


def _is_active(gap: float, multiplier: float, tolerance: float) -> bool:
    return gap < -tolerance or multiplier > tolerance


@dataclass(frozen=True)
class ObstacleConstraint:
    """Enforces ``g = 0`` where contact is active and ``u = 0`` elsewhere."""

    obstacle: Obstacle
    tolerance: float = CONTACT_TOLERANCE

    def _gap(self, node, displacement, t: float) -> tuple[np.ndarray, float]:
        chi = _deformed_position(node, displacement)
        return chi, float(self.obstacle.value(*chi, t))

    def residual(self, node, displacement, u: float, t: float) -> float:
        """The gap where contact is active, the multiplier itself otherwise."""
        _, gap = self._gap(node, displacement, t)
        if _is_active(gap, u, self.tolerance):
            return gap
        return float(u)

    def jacobian(self, node, displacement, u: float, t: float) -> float:
        """Derivative of the residual with respect to the multiplier."""
        _, gap = self._gap(node, displacement, t)
        return 0.0 if _is_active(gap, u, self.tolerance) else 1.0

    def off_diag_jacobian(self, node, displacement, u: float, t: float, jvar) -> float:
        """Derivative of the residual with respect to the coupled variable ``jvar``."""
        jvar = Component(jvar)
        chi, gap = self._gap(node, displacement, t)
        if jvar is Component.LAMBDA or not _is_active(gap, u, self.tolerance):
            return 0.0
        return float(self.obstacle.gradient(*chi, t)[jvar])


@dataclass(frozen=True)
class IdentityNoContact:
    """Keeps the multiplier non-negative away from contact.

    The residual is the multiplier only where contact is inactive and the
    multiplier is negative; it is zero everywhere else.
    """

    gap: GapFunction = circular_gap
    tolerance: float = CONTACT_TOLERANCE

    def _gap(self, node, displacement, t: float) -> float:
        chi = _deformed_position(node, displacement)
        return float(self.gap(*chi, t))

    def residual(self, node, displacement, u: float, t: float) -> float:
        """Negative part of the multiplier where contact is inactive, zero otherwise."""
        gap = self._gap(node, displacement, t)
        if _is_active(gap, u, self.tolerance):
            return 0.0
        if u < 0.0:
            return float(u)
        return 0.0

    def jacobian(self, node, displacement, u: float, t: float) -> float:
        """One where contact is inactive, zero where it is active."""
        gap = self._gap(node, displacement, t)
        return 0.0 if _is_active(gap, u, self.tolerance) else 1.0

    def off_diag_jacobian(self, node, displacement, u: float, t: float, jvar) -> float:
        """The residual does not depend on the displacements."""
        Component(jvar)
        return 0.0