# owlmech

Pointwise constitutive laws and contact terms for finite-strain solid
mechanics, written on NumPy 3×3 tensors.

Everything works at one quadrature point or one mesh node. You pass in a
displacement gradient, a deformation gradient or nodal values. You get back
stresses, energies, directional derivatives of the stress, and residual and
Jacobian entries for contact equations. The package depends only on NumPy.
The `test` extra adds pytest for running the test suite.

## Modules

### `owlmech.elastic`

These laws are driven by the displacement gradient `grad_u`, with
`F = I + grad_u`. Each takes an optional microstructure tensor `K`, which
defaults to the identity. The natural state is `B_K = (Kᵀ K)⁻¹` and
`J_K = det K`.

- `displacement_gradient(grad_x, grad_y, grad_z=None)` stacks the gradients of
  the three displacement components into rows of a 3×3 array. A missing
  `grad_z` counts as zero. It raises `ValueError` unless each row has three
  components.
- `ElasticMaterial` is the abstract base. It declares `stress(grad_u, K=None)`,
  which gives the first Piola–Kirchhoff stress, and `jacobian(grad_u, H, K=None)`,
  which gives the derivative of the stress in the direction `H`.
- `LinearElasticity(mu=1.0, lam=1.0)` is small-strain isotropic elasticity.
  It ignores `K`.
- `DeSaintVenant(mu=1.0, lam=1.0)` is the Saint Venant–Kirchhoff law.
- `NeoHookean(mu=1.0, lam=1.0)` is neo-Hookean with a quadratic volumetric term.
- `NeoHookeanCOMSOL(mu=1.0, lam=1.0)` is neo-Hookean with a logarithmic
  volumetric term. It raises `ValueError` when `det F <= 0`.
- `HolmesMow(mu=1.0, lam=1.0)` is the Holmes–Mow exponential law.

All material classes are frozen dataclasses. Tensor arguments that are not 3×3
raise `ValueError`.

### `owlmech.elastoplastic`

These are the same families, written on the deformation gradient `F` and a
plastic state `B_K`. `B_K` defaults to the identity, and
`J_K = 1 / sqrt(det B_K)`. A `B_K` with a non-positive determinant raises
`ValueError`.

- `ElastoPlasticMaterial` is the abstract base. It declares
  `first_piola(F, B_K=None)`, `energy(F, B_K=None)` and
  `jacobian(F, H, B_K=None)`. It also provides `evaluate(grad_u, B_K=None)`,
  which returns an `ElastoPlasticState` holding `F`, `J = det F`, the stress
  `P` and the energy `psi`.
- `DeSaintVenantPlastic(mu, lam)` and `NeoHookeanPlastic(mu, lam)` require
  both constants. The energy of `NeoHookeanPlastic` raises `ValueError` when
  `det F <= 0`.
- `HolmesMowPlastic(mu=1.0, lam=1.0)`.

### `owlmech.microstructure`

- `FunctionMicrostructure(entries)` holds `entries`, a mapping from
  `(row, column)` to a callable `f(t, point)`. Entries that are not given
  default to the identity, and an index outside 0–2 raises `ValueError`.
  `evaluate(t, point)` returns a named tuple `(K, B_K)` with `B_K = Kᵀ K`.
- `Microstructure(lambda_p, sigma_y=0.0)` holds the parameters shared by the
  growth laws.
- `GradeOneGrowth(lambda_p, sigma_y=0.0, is_explicit=True)` gives the isotropic
  state `B_K = J_k^(-2/3) I`. `initial(jk)` uses `jk`. `update(jk, jk_old)`
  uses `jk_old` when explicit and `jk` otherwise. A non-positive `J_k` raises
  `ValueError`.
- `GradeZeroExplicit(lambda_p, sigma_y=0.0)` is an explicit plastic flow of
  `B_K`.
  - `initial()` returns `(B_K=I, det_K=1.0)`.
  - `update(B_K_old, F_old, P_old, dt)` advances `B_K` using the deviatoric
    Cauchy and Mandel stresses from the previous step. It returns the new
    `B_K` and `det_K = 1 / sqrt(det B_K)`. A singular `F_old` raises
    `ValueError`.

### `owlmech.obstacles`

Gap functions `g(x, y, z, t)`. A point is admissible where `g >= 0` and
penetrates the obstacle where `g < 0`.

- `CONTACT_TOLERANCE` is `1e-10`. It is the tolerance on the gap and on the
  multiplier.
- `Component` is an integer enum of the coupled variables: `X`, `Y`, `Z` and
  `LAMBDA`.
- `Obstacle` is the abstract base. It declares `value`, `gradient` (a
  3-vector) and `hessian` (a symmetric 3×3 array), each called with
  `(x, y, z, t)`.
- `ParabolicObstacle()` is the parabola `y = 1 + 4 (x − 0.5)²`. It descends at
  rate 0.05 until `t = 6.95`, holds at depth 0.35 until `t = 24.95`, then
  rises again.
- `CageObstacle2D()` is a planar cage bounded by `x = −0.2`, `x = 1.2` and
  `y = 1.2`.
- `circular_gap(x, y, z, t)` is the gap to a circular obstacle that closes in
  at rate 0.1 per unit time.
- `FunctionObstacle(g, gx, gy, gxx, gxy, gyy, gz=…, gxz=…, gyz=…, gzz=…)` is an
  obstacle built from user callables `f(t, point)`. The `z` derivatives default
  to zero. `evaluate(t, point, displacement=None)` returns an
  `ObstacleEvaluation` with `value`, `gradient`, `gradient_norm` and `hessian`,
  all taken at `point + displacement`. Two-component vectors are padded with
  zero.

### `owlmech.constraints`

These are terms for the equation of the contact multiplier `u` at a node.
Contact is active when `g < -tol` or `u > tol`.

- `ObstacleConstraint(obstacle, tolerance=CONTACT_TOLERANCE)`:
  - `residual` returns `g` where contact is active and `u` elsewhere.
  - `jacobian` returns 0 or 1 to match.
  - `off_diag_jacobian(..., jvar)` returns the gap gradient component for a
    displacement variable where contact is active, and 0 otherwise.
- `IdentityNoContact(gap=circular_gap, tolerance=CONTACT_TOLERANCE)`:
  - `residual` returns `u` where contact is inactive and `u < 0`, and 0
    otherwise.
  - `jacobian` returns 1 where contact is inactive.
  - `off_diag_jacobian` is always 0.

All methods take `(node, displacement, u, t)`.

### `owlmech.multipliers`

- `ContactMultiplier(component, obstacle, tolerance=CONTACT_TOLERANCE)` is the
  force the multiplier puts on the equation of displacement `component`.
  - `residual(node, displacement, multiplier, t)` is `−λ ∂g/∂x_component`
    where contact is active.
  - `jacobian` uses the diagonal entry of the Hessian.
  - `off_diag_jacobian(..., jvar)` uses the off-diagonal Hessian entries for
    the other displacements, and `−∂g/∂x_component` for `Component.LAMBDA`.

  Passing `Component.LAMBDA` as `component` raises `ValueError`.

## Example

```python
import numpy as np

from owlmech.elastic import NeoHookean, displacement_gradient
from owlmech.elastoplastic import NeoHookeanPlastic
from owlmech.microstructure import GradeZeroExplicit
from owlmech.obstacles import Component, ParabolicObstacle
from owlmech.constraints import ObstacleConstraint
from owlmech.multipliers import ContactMultiplier

grad_u = displacement_gradient([0.01, 0.0, 0.0], [0.0, 0.02, 0.0])
law = NeoHookean(mu=1.0, lam=1.0)
P = law.stress(grad_u)
dP = law.jacobian(grad_u, np.eye(3))

plastic = NeoHookeanPlastic(mu=1.0, lam=1.0)
flow = GradeZeroExplicit(lambda_p=0.5, sigma_y=0.1)
state = flow.initial()
point = plastic.evaluate(grad_u, state.B_K)
state = flow.update(state.B_K, point.F, point.P, dt=0.1)

obstacle = ParabolicObstacle()
constraint = ObstacleConstraint(obstacle)
r_lambda = constraint.residual((0.5, 1.0), (0.0, -0.01), u=0.0, t=0.0)
force_y = ContactMultiplier(Component.Y, obstacle)
r_y = force_y.residual((0.5, 1.0), (0.0, -0.01), multiplier=0.0, t=0.0)
```

## What the package does not do

There is no mesh, no finite-element assembly, no nonlinear solver, no input
file format and no command-line program. Quadrature loops, storage of
history variables between time steps, and the coupling of these terms into a
global system are left to the calling code.