"""Model records consumed by the posterior diagnostics.

A fitted model is described by an explicit record rather than queried ad hoc:
its family flags, its response (which may be missing), its residual scale
(which may be undefined) and its posterior trace.
"""

from dataclasses import dataclass, field
from enum import Enum

import arviz as az
import numpy as np
import pandas as pd


class ModelFamily(Enum):
    """Statistical family that drives the default ROPE magnitude."""

    LINEAR = "linear"
    BINOMIAL = "binomial"
    COUNT = "count"
    TTEST = "ttest"
    CORRELATION = "correlation"
    DEFAULT = "default"


@dataclass(frozen=True)
class ModelInfo:
    """Family flags for a model.

    Several flags may be set at once; the first one in the order
    linear, binomial, count, t-test, correlation decides the family.
    """

    is_linear: bool = False
    is_binomial: bool = False
    is_count: bool = False
    is_ttest: bool = False
    is_correlation: bool = False


@dataclass
class FittedModel:
    """A fitted model and whatever could be extracted from it.

    Attributes:
        info: Family flags
        trace: Posterior samples (None when only a ROPE range is wanted)
        response: Observed response; a DataFrame with one column per response
            (or a 2-D array, one column per response) for multi-response
            models; None when unavailable
        sigma: Residual scale; None when undefined
        random_effects: Posterior variables belonging to the random effects
        zero_inflated: Posterior variables belonging to the zero-inflation part
        submodels: One model per response for multivariate models
    """

    info: ModelInfo = field(default_factory=ModelInfo)
    trace: az.InferenceData | None = None
    response: np.ndarray | pd.Series | pd.DataFrame | None = None
    sigma: float | None = None
    random_effects: tuple[str, ...] = ()
    zero_inflated: tuple[str, ...] = ()
    submodels: list["FittedModel"] = field(default_factory=list)

    @property
    def is_multivariate(self) -> bool:
        """True when the model has one submodel per response."""
        return bool(self.submodels)


@dataclass
class BayesFactorModel:
    """A Bayes factor comparison rather than a direct posterior fit.

    Attributes:
        data: Raw data table the comparison was computed on
        numerator: Family flags of the numerator (alternative) model
        response: Column of `data` holding the response, if any
        trace: Posterior samples of the numerator model, if sampled
    """

    data: pd.DataFrame
    numerator: ModelInfo = field(default_factory=ModelInfo)
    response: str | None = None
    trace: az.InferenceData | None = None

    @property
    def info(self) -> ModelInfo:
        """Family flags of the comparison, i.e. those of its numerator."""
        return self.numerator

    def get_response(self) -> pd.Series:
        """Return the response column of the raw data.

        Raises:
            KeyError: If no response column is declared or it is missing
        """
        if self.response is None:
            raise KeyError("Bayes factor model declares no response column")
        return self.data[self.response]
