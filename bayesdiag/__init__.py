"""Default ROPE ranges and Monte Carlo Standard Errors for Bayesian models."""

from bayesdiag.analysis import (
    EssConfig,
    RopeEstimate,
    RopeRangeWarning,
    check_mcse,
    classify,
    compute_mcse,
    effective_sample,
    get_parameters,
    mcse,
    negligible_effect,
    rope_range,
)
from bayesdiag.models import BayesFactorModel, FittedModel, ModelFamily, ModelInfo, from_pymc

__all__ = [
    "BayesFactorModel",
    "check_mcse",
    "classify",
    "compute_mcse",
    "effective_sample",
    "EssConfig",
    "FittedModel",
    "from_pymc",
    "get_parameters",
    "mcse",
    "ModelFamily",
    "ModelInfo",
    "negligible_effect",
    "rope_range",
    "RopeEstimate",
    "RopeRangeWarning",
]
