"""Model records and PyMC model classification.

Models:
- base: family flags, fitted model and Bayes factor records
- pymc_info: build fitted model records from PyMC models
"""

from bayesdiag.models.base import BayesFactorModel, FittedModel, ModelFamily, ModelInfo
from bayesdiag.models.pymc_info import from_pymc, info_from_likelihood, model_info_from_pymc

__all__ = [
    "BayesFactorModel",
    "FittedModel",
    "from_pymc",
    "info_from_likelihood",
    "ModelFamily",
    "ModelInfo",
    "model_info_from_pymc",
]
