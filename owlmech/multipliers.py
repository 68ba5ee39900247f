"""Contact force contributed by a Lagrange multiplier to a displacement equation.

Where contact is active, the equation of displacement ``component`` receives
``-lambda * dg/dx_component`` at the deformed node position. The Jacobians
follow from the gradient and Hessian of the obstacle's gap function.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constraints import _deformed_position, _is_active
from .obstacles import CONTACT_TOLERANCE, Component, Obstacle

__all__ = ["ContactMultiplier"]


@dataclass(frozen=True)
class ContactMultiplier:
    """Contact force on one displacement component from the multiplier ``lambda``."""

    component: Component
    obstacle: Obstacle
    tolerance: float = CONTACT_TOLERANCE

    def __post_init__(self) -> None:
        component = Component(self.component)
        if component is Component.LAMBDA:
            raise ValueError("component must be a displacement direction")
        object.__setattr__(self, "component", component)

    def _state(self, node, displacement, multiplier: float, t: float):
        chi = _deformed_position(node, displacement)
        gap = float(self.obstacle.value(*chi, t))
        return chi, _is_active(gap, multiplier, self.tolerance)

    def residual(self, node, displacement, multiplier: float, t: float) -> float:
        """``-lambda * dg/dx_component`` where contact is active, zero otherwise."""
        chi, active = self._state(node, displacement, multiplier, t)
        if not active:
            return 0.0
        return -multiplier * float(self.obstacle.gradient(*chi, t)[self.component])

    def jacobian(self, node, displacement, multiplier: float, t: float) -> float:
        """Derivative of the residual with respect to its own displacement component."""
        chi, active = self._state(node, displacement, multiplier, t)
        if not active:
            return 0.0
        hessian = self.obstacle.hessian(*chi, t)
        return -multiplier * float(hessian[self.component, self.component])

    def off_diag_jacobian(
        self, node, displacement, multiplier: float, t: float, jvar
    ) -> float:
        """Derivative of the residual with respect to the coupled variable ``jvar``."""
        jvar = Component(jvar)
        chi, active = self._state(node, displacement, multiplier, t)
        if not active or jvar is self.component:
            return 0.0
        if jvar is Component.LAMBDA:
            return -float(self.obstacle.gradient(*chi, t)[self.component])
        hessian = self.obstacle.hessian(*chi, t)
        return -multiplier * float(hessian[self.component, jvar])