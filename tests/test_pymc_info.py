"""
test_pymc_info.py
-----------------

Tests for classifying PyMC models by their likelihood. No sampling.
"""

import arviz as az
import numpy as np
import pymc as pm
import pytest

from bayesdiag.analysis.rope_range import rope_range
from bayesdiag.models import ModelInfo, from_pymc, info_from_likelihood, model_info_from_pymc


@pytest.mark.parametrize(
    "name, expected",
    [
        ("normal", ModelInfo(is_linear=True)),
        ("studentt", ModelInfo(is_linear=True)),
        ("bernoulli", ModelInfo(is_binomial=True)),
        ("binomial", ModelInfo(is_binomial=True)),
        ("poisson", ModelInfo(is_count=True)),
        ("nbinom", ModelInfo(is_count=True)),
        ("negative_binomial", ModelInfo(is_count=True)),
        ("gamma", ModelInfo()),
        ("lognormal", ModelInfo()),
    ],
)
def test_info_from_likelihood(name, expected):
    assert info_from_likelihood(name) == expected


def test_linear_model():
    y = np.array([2.0, 4.0, 6.0])
    with pm.Model() as model:
        mu = pm.Normal("mu", 0, 1)
        sigma = pm.HalfNormal("sigma", 1)
        pm.Normal("y", mu=mu, sigma=sigma, observed=y)

    fitted = from_pymc(model)
    assert fitted.info == ModelInfo(is_linear=True)
    assert not fitted.is_multivariate
    np.testing.assert_allclose(fitted.response, y)
    assert rope_range(fitted) == pytest.approx((-0.2, 0.2))


def test_logistic_model():
    with pm.Model() as model:
        a = pm.Normal("a", 0, 1)
        pm.Bernoulli("y", p=pm.math.sigmoid(a), observed=[0, 1, 1, 0])

    assert model_info_from_pymc(model) == [ModelInfo(is_binomial=True)]
    assert rope_range(from_pymc(model)) == pytest.approx((-0.1814, 0.1814), abs=1e-4)


def test_count_model_takes_sigma_from_trace():
    with pm.Model() as model:
        a = pm.Normal("a", 0, 1)
        pm.Poisson("y", mu=pm.math.exp(a), observed=[0, 3, 1, 2])

    trace = az.from_dict(posterior={"a": np.zeros((1, 4)), "sigma": np.full((1, 4), 2.0)})
    fitted = from_pymc(model, trace)
    assert fitted.info == ModelInfo(is_count=True)
    assert fitted.sigma == pytest.approx(2.0)
    assert rope_range(fitted) == pytest.approx((-0.2, 0.2))


def test_residual_scale_missing_from_trace():
    with pm.Model() as model:
        a = pm.Normal("a", 0, 1)
        pm.Poisson("y", mu=pm.math.exp(a), observed=[0, 3, 1, 2])

    trace = az.from_dict(posterior={"a": np.zeros((1, 4))})
    assert from_pymc(model, trace).sigma is None
    assert from_pymc(model, trace, sigma_name=None).sigma is None


def test_several_observed_variables_are_multivariate():
    with pm.Model() as model:
        mu = pm.Normal("mu", 0, 1)
        pm.Normal("y1", mu=mu, sigma=1.0, observed=[2.0, 4.0, 6.0])
        pm.Bernoulli("y2", p=0.5, observed=[0, 1])

    fitted = from_pymc(model, random_effects=("mu",))
    assert fitted.is_multivariate
    assert fitted.random_effects == ("mu",)
    assert [sub.info for sub in fitted.submodels] == [
        ModelInfo(is_linear=True),
        ModelInfo(is_binomial=True),
    ]
    result = rope_range(fitted)
    assert result[0] == pytest.approx((-0.2, 0.2))
    assert result[1] == pytest.approx((-0.1814, 0.1814), abs=1e-4)


def test_residual_scale_per_observed_variable():
    with pm.Model() as model:
        a = pm.Normal("a", 0, 1)
        pm.Poisson("y1", mu=pm.math.exp(a), observed=[0, 3, 1, 2])
        pm.Poisson("y2", mu=pm.math.exp(a), observed=[5, 1, 4, 2])

    trace = az.from_dict(
        posterior={
            "a": np.zeros((1, 4)),
            "sigma_y1": np.full((1, 4), 2.0),
            "sigma_y2": np.full((1, 4), 4.0),
        }
    )
    fitted = from_pymc(model, trace, sigma_name={"y1": "sigma_y1", "y2": "sigma_y2"})

    assert [sub.sigma for sub in fitted.submodels] == pytest.approx([2.0, 4.0])
    assert fitted.sigma is None
    result = rope_range(fitted)
    assert result[0] == pytest.approx((-0.2, 0.2))
    assert result[1] == pytest.approx((-0.4, 0.4))


def test_vector_residual_scale_is_ignored():
    with pm.Model() as model:
        a = pm.Normal("a", 0, 1)
        pm.Poisson("y", mu=pm.math.exp(a), observed=[0, 3, 1, 2])

    trace = az.from_dict(posterior={"a": np.zeros((1, 4)), "sigma": np.ones((1, 4, 2))})
    assert from_pymc(model, trace).sigma is None
