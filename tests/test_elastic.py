import math

import numpy as np
import pytest

from owlmech.elastic import (
    DeSaintVenant,
    ElasticMaterial,
    HolmesMow,
    LinearElasticity,
    NeoHookean,
    NeoHookeanCOMSOL,
    displacement_gradient,
)


def _name(model):
    return type(model).__name__


def _random_gradient(seed, scale=0.1):
    rng = np.random.default_rng(seed)
    return scale * rng.standard_normal((3, 3))


def _microstructure_tensor():
    return np.eye(3) + _random_gradient(42, scale=0.05)


def _rotation(angle):
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def test_displacement_gradient_rows():
    grad = displacement_gradient([1, 2, 3], [4, 5, 6], [7, 8, 9])
    np.testing.assert_array_equal(grad, np.arange(1, 10, dtype=float).reshape(3, 3))


def test_displacement_gradient_two_dimensional_has_zero_last_row():
    grad = displacement_gradient([1, 2, 0], [3, 4, 0])
    np.testing.assert_array_equal(grad[2], np.zeros(3))
    np.testing.assert_array_equal(grad[0], [1.0, 2.0, 0.0])


def test_displacement_gradient_rejects_wrong_length():
    with pytest.raises(ValueError):
        displacement_gradient([1, 2], [3, 4])


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        ElasticMaterial()


def test_default_parameters():
    model = NeoHookean()
    assert (model.mu, model.lam) == (1.0, 1.0)


@pytest.mark.parametrize(
    "model",
    [
        LinearElasticity(mu=1.3, lam=0.7),
        DeSaintVenant(mu=1.3, lam=0.7),
        NeoHookean(mu=1.3, lam=0.7),
        NeoHookeanCOMSOL(mu=1.3, lam=0.7),
        HolmesMow(mu=1.3, lam=0.7),
    ],
    ids=_name,
)
def test_zero_displacement_is_stress_free(model):
    np.testing.assert_allclose(model.stress(np.zeros((3, 3))), np.zeros((3, 3)), atol=1e-12)


@pytest.mark.parametrize(
    "model",
    [
        DeSaintVenant(mu=1.3, lam=0.7),
        NeoHookean(mu=1.3, lam=0.7),
        NeoHookeanCOMSOL(mu=1.3, lam=0.7),
        HolmesMow(mu=1.3, lam=0.7),
    ],
    ids=_name,
)
def test_rigid_rotation_is_stress_free(model):
    grad_u = _rotation(0.4) - np.eye(3)
    np.testing.assert_allclose(model.stress(grad_u), np.zeros((3, 3)), atol=1e-12)


@pytest.mark.parametrize(
    "model",
    [
        DeSaintVenant(mu=1.3, lam=0.7),
        NeoHookean(mu=1.3, lam=0.7),
        NeoHookeanCOMSOL(mu=1.3, lam=0.7),
        HolmesMow(mu=1.3, lam=0.7),
    ],
    ids=_name,
)
def test_natural_state_from_microstructure_is_stress_free(model):
    K = _microstructure_tensor()
    np.testing.assert_allclose(model.stress(K - np.eye(3), K), np.zeros((3, 3)), atol=1e-10)


@pytest.mark.parametrize(
    "model",
    [
        DeSaintVenant(mu=1.3, lam=0.7),
        NeoHookean(mu=1.3, lam=0.7),
        NeoHookeanCOMSOL(mu=1.3, lam=0.7),
        HolmesMow(mu=1.3, lam=0.7),
    ],
    ids=_name,
)
def test_microstructure_changes_stress(model):
    grad_u = _random_gradient(1)
    assert not np.allclose(model.stress(grad_u), model.stress(grad_u, _microstructure_tensor()))


@pytest.mark.parametrize(
    "model",
    [
        DeSaintVenant(mu=1.3, lam=0.7),
        NeoHookean(mu=1.3, lam=0.7),
        NeoHookeanCOMSOL(mu=1.3, lam=0.7),
        HolmesMow(mu=1.3, lam=0.7),
    ],
    ids=_name,
)
def test_identity_microstructure_matches_default(model):
    grad_u = _random_gradient(2)
    np.testing.assert_allclose(model.stress(grad_u, np.eye(3)), model.stress(grad_u))


@pytest.mark.parametrize(
    "model",
    [
        DeSaintVenant(mu=1.3, lam=0.7),
        NeoHookean(mu=1.3, lam=0.7),
        NeoHookeanCOMSOL(mu=1.3, lam=0.7),
        HolmesMow(mu=1.3, lam=0.7),
    ],
    ids=_name,
)
def test_cauchy_like_product_is_symmetric(model):
    grad_u = _random_gradient(3)
    F = np.eye(3) + grad_u
    product = model.stress(grad_u, _microstructure_tensor()) @ F.T
    np.testing.assert_allclose(product, product.T, atol=1e-10)


@pytest.mark.parametrize(
    "model",
    [
        LinearElasticity(mu=1.3, lam=0.7),
        DeSaintVenant(mu=1.3, lam=0.7),
        NeoHookean(mu=1.3, lam=0.7),
        NeoHookeanCOMSOL(mu=1.3, lam=0.7),
        HolmesMow(mu=1.3, lam=0.7),
    ],
    ids=_name,
)
@pytest.mark.parametrize("use_microstructure", [False, True])
def test_jacobian_matches_finite_difference(model, use_microstructure):
    K = _microstructure_tensor() if use_microstructure else None
    grad_u = _random_gradient(4)
    H = _random_gradient(5, scale=1.0)
    h = 1e-6
    numeric = (model.stress(grad_u + h * H, K) - model.stress(grad_u - h * H, K)) / (2 * h)
    np.testing.assert_allclose(model.jacobian(grad_u, H, K), numeric, rtol=1e-5, atol=1e-7)


@pytest.mark.parametrize(
    "model",
    [
        LinearElasticity(mu=1.3, lam=0.7),
        DeSaintVenant(mu=1.3, lam=0.7),
        NeoHookean(mu=1.3, lam=0.7),
        NeoHookeanCOMSOL(mu=1.3, lam=0.7),
        HolmesMow(mu=1.3, lam=0.7),
    ],
    ids=_name,
)
def test_jacobian_is_linear_in_direction(model):
    grad_u = _random_gradient(6)
    H1 = _random_gradient(7, scale=1.0)
    H2 = _random_gradient(8, scale=1.0)
    combined = model.jacobian(grad_u, 2.0 * H1 + H2)
    separate = 2.0 * model.jacobian(grad_u, H1) + model.jacobian(grad_u, H2)
    np.testing.assert_allclose(combined, separate, atol=1e-10)


@pytest.mark.parametrize(
    "model",
    [
        DeSaintVenant(mu=1.3, lam=0.7),
        NeoHookean(mu=1.3, lam=0.7),
        NeoHookeanCOMSOL(mu=1.3, lam=0.7),
        HolmesMow(mu=1.3, lam=0.7),
    ],
    ids=_name,
)
def test_uniaxial_stretch_gives_tensile_stress(model):
    assert model.stress(np.diag([0.05, 0.0, 0.0]))[0, 0] > 0.0


def test_linear_stress_is_symmetric_and_ignores_microstructure():
    model = LinearElasticity(mu=2.0, lam=0.5)
    grad_u = _random_gradient(9)
    sigma = model.stress(grad_u)
    np.testing.assert_allclose(sigma, sigma.T)
    np.testing.assert_allclose(model.stress(grad_u, _microstructure_tensor()), sigma)


def test_linear_stress_ignores_skew_part():
    model = LinearElasticity()
    skew = np.array([[0.0, 0.3, 0.0], [-0.3, 0.0, 0.0], [0.0, 0.0, 0.0]])
    np.testing.assert_allclose(model.stress(skew), np.zeros((3, 3)))


def test_linear_jacobian_independent_of_state():
    model = LinearElasticity(mu=1.5, lam=0.3)
    H = _random_gradient(10, scale=1.0)
    np.testing.assert_allclose(
        model.jacobian(np.zeros((3, 3)), H), model.jacobian(_random_gradient(11), H)
    )
    np.testing.assert_allclose(model.jacobian(np.zeros((3, 3)), H), model.stress(H))


def test_neo_hookean_singular_deformation_raises():
    with pytest.raises(np.linalg.LinAlgError):
        NeoHookean().stress(np.diag([-1.0, 0.0, 0.0]))


def test_comsol_inverted_element_raises():
    with pytest.raises(ValueError):
        NeoHookeanCOMSOL().stress(np.diag([-2.0, 0.0, 0.0]))


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        DeSaintVenant().stress(np.zeros((2, 2)))