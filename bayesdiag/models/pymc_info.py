"""Classify PyMC models and collect what the diagnostics need from them."""

from collections.abc import Mapping

import arviz as az
import numpy as np
import pymc as pm

from bayesdiag.models.base import FittedModel, ModelInfo

# likelihood names as reported by the random variable op
_LINEAR = {"normal", "t", "studentt", "student_t"}
_COUNT = ("poisson", "nbinom", "negative_binomial", "geometric")
_BINOMIAL = ("bernoulli", "binomial")


def likelihood_name(rv) -> str:
    """Return the lower-case distribution name of a random variable."""
    op = rv.owner.op
    return str(getattr(op, "name", None) or type(op).__name__).lower()


def info_from_likelihood(name: str) -> ModelInfo:
    """Map a likelihood distribution name to family flags.

    Count names are checked before binomial ones ("negative_binomial").
    """
    if any(count in name for count in _COUNT):
        return ModelInfo(is_count=True)
    if any(binomial in name for binomial in _BINOMIAL):
        return ModelInfo(is_binomial=True)
    if name in _LINEAR:
        return ModelInfo(is_linear=True)
    return ModelInfo()


def model_info_from_pymc(model: pm.Model) -> list[ModelInfo]:
    """Family flags for each observed variable of a PyMC model, in model order."""
    return [info_from_likelihood(likelihood_name(rv)) for rv in model.observed_RVs]


def observed_data(model: pm.Model, rv) -> np.ndarray:
    """Return the data an observed random variable was conditioned on."""
    return np.asarray(model.rvs_to_values[rv].eval(), dtype=float)


def residual_scale(trace: az.InferenceData | None, sigma_name: str | None) -> float | None:
    """Posterior mean of a scalar residual scale variable, None if there is none."""
    if trace is None or sigma_name is None:
        return None
    if sigma_name not in trace.posterior.data_vars:
        return None
    sigma = trace.posterior[sigma_name]
    if set(sigma.dims) != {"chain", "draw"}:
        return None
    return float(sigma.mean())


def from_pymc(
    model: pm.Model,
    trace: az.InferenceData | None = None,
    sigma_name: str | Mapping[str, str] | None = "sigma",
    random_effects: tuple[str, ...] = (),
    zero_inflated: tuple[str, ...] = (),
) -> FittedModel:
    """Build a FittedModel from a PyMC model and its trace.

    One observed variable gives a univariate model. Several observed
    variables give a multivariate model with one submodel per observed
    variable, in model order.

    Args:
        model: PyMC model with at least one observed variable
        trace: Posterior samples from pm.sample (optional)
        sigma_name: Posterior variable holding the residual scale, shared by
            all observed variables, or a mapping from observed variable name
            to its own residual scale variable
        random_effects: Posterior variables belonging to the random effects
        zero_inflated: Posterior variables belonging to the zero-inflation part

    Returns:
        FittedModel for the diagnostics

    Example:
        with pm.Model() as model:
            beta = pm.Normal("beta", 0, 1)
            sigma = pm.HalfNormal("sigma", 1)
            pm.Normal("y", mu=beta * x, sigma=sigma, observed=y)
        fitted = from_pymc(model, trace)
        rope_range(fitted)
    """
    if isinstance(sigma_name, Mapping):
        sigma_names = {rv.name: sigma_name.get(rv.name) for rv in model.observed_RVs}
    else:
        sigma_names = {rv.name: sigma_name for rv in model.observed_RVs}

    submodels = [
        FittedModel(
            info=info_from_likelihood(likelihood_name(rv)),
            response=observed_data(model, rv),
            sigma=residual_scale(trace, sigma_names[rv.name]),
        )
        for rv in model.observed_RVs
    ]

    if len(submodels) == 1:
        single = submodels[0]
        return FittedModel(
            info=single.info,
            trace=trace,
            response=single.response,
            sigma=single.sigma,
            random_effects=tuple(random_effects),
            zero_inflated=tuple(zero_inflated),
        )

    # a multivariate model has no single residual scale unless it is shared
    shared = None if isinstance(sigma_name, Mapping) else residual_scale(trace, sigma_name)
    return FittedModel(
        trace=trace,
        sigma=shared,
        random_effects=tuple(random_effects),
        zero_inflated=tuple(zero_inflated),
        submodels=submodels,
    )
