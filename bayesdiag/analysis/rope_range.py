"""Default Region Of Practical Equivalence (ROPE) bounds.

Kruschke (2018) suggests a ROPE of -0.1 to 0.1 of a standardized parameter,
a negligible effect size according to Cohen (1988). The magnitude is
adapted to the model family:

- Linear models: 0.1 * SD of the response
- Logistic / binary models: 0.1 * pi / sqrt(3), the log odds ratio to
  standardized difference conversion (about 0.18)
- Count models: 0.1 * residual scale (experimental, use with care)
- t-tests: 0.1 * SD of the response, only available for Bayes factor models
- Correlations: 0.05, half of Cohen's negligible correlation
- Anything else: 0.1, but specify the ROPE manually where possible

Reference: Kruschke, J. K. (2018). Rejecting or accepting parameter values
in Bayesian estimation. Advances in Methods and Practices in Psychological
Science, 1(2), 270-280.
"""

import math
import warnings
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np
import pandas as pd

from bayesdiag.models.base import BayesFactorModel, FittedModel, ModelFamily, ModelInfo

NEGLIGIBLE = 0.1
NEGLIGIBLE_CORRELATION = 0.05
LOGISTIC_SCALE = math.pi / math.sqrt(3)

FALLBACK_MESSAGE = "Could not estimate a good default ROPE range. Using default."

RopeInterval = tuple[float, float]


class RopeEstimationError(Exception):
    """The negligible effect size could not be estimated for a model."""


class RopeRangeWarning(UserWarning):
    """A default ROPE range fell back to the generic negligible value."""


@dataclass(frozen=True)
class RopeEstimate:
    """Negligible effect size, with the reason it fell back if it did.

    Attributes:
        value: Negligible magnitude k; the ROPE is (-k, k)
        message: None when the estimate succeeded, otherwise a diagnostic
    """

    value: float
    message: str | None = None

    @property
    def interval(self) -> RopeInterval:
        """The symmetric ROPE (-k, k)."""
        return (-self.value, self.value)


def classify(info: ModelInfo) -> ModelFamily:
    """Return the first family whose flag is set, DEFAULT if none is."""
    if info.is_linear:
        return ModelFamily.LINEAR
    if info.is_binomial:
        return ModelFamily.BINOMIAL
    if info.is_count:
        return ModelFamily.COUNT
    if info.is_ttest:
        return ModelFamily.TTEST
    if info.is_correlation:
        return ModelFamily.CORRELATION
    return ModelFamily.DEFAULT


def response_sd(response) -> float:
    """Sample standard deviation of a response, ignoring missing values."""
    if response is None:
        raise RopeEstimationError("No response available")
    values = pd.Series(np.asarray(response, dtype=float).reshape(-1))
    return float(values.std(skipna=True))


# --- per-family negligible magnitudes ---


def _linear(model, response) -> float:
    return NEGLIGIBLE * response_sd(response)


def _binomial(model, response) -> float:
    return NEGLIGIBLE * LOGISTIC_SCALE


def _count(model, response) -> float:
    sigma = getattr(model, "sigma", None)
    if sigma is None or not np.isfinite(sigma):
        raise RopeEstimationError(f"Residual scale is undefined: {sigma!r}")
    return NEGLIGIBLE * float(sigma)


def _ttest(model, response) -> float:
    if not isinstance(model, BayesFactorModel):
        raise RopeEstimationError("t-test response only available for Bayes factor models")
    return NEGLIGIBLE * response_sd(model.data.iloc[:, 0])


def _correlation(model, response) -> float:
    return NEGLIGIBLE_CORRELATION


def _default(model, response) -> float:
    return NEGLIGIBLE


_RESOLVERS: dict[ModelFamily, Callable[..., float]] = {
    ModelFamily.LINEAR: _linear,
    ModelFamily.BINOMIAL: _binomial,
    ModelFamily.COUNT: _count,
    ModelFamily.TTEST: _ttest,
    ModelFamily.CORRELATION: _correlation,
    ModelFamily.DEFAULT: _default,
}


def negligible_effect(model, info: ModelInfo, response=None) -> RopeEstimate:
    """Estimate the negligible effect size of one model/response pair.

    Never raises: any failure gives the generic 0.1 with a message.

    Args:
        model: The model (its residual scale / raw data may be consulted)
        info: Family flags for this response
        response: Observed response values (may be None)

    Returns:
        RopeEstimate with the magnitude and, on fallback, a diagnostic.

    """
    try:
        value = _RESOLVERS[classify(info)](model, response)
        if not np.isfinite(value):
            raise RopeEstimationError(f"Negligible effect size is not finite: {value}")
    except Exception:
        return RopeEstimate(NEGLIGIBLE, FALLBACK_MESSAGE)
    return RopeEstimate(float(value))


def bayes_factor_effect(model: BayesFactorModel) -> RopeEstimate:
    """Negligible effect size of a Bayes factor comparison.

    A linear numerator scales 0.1 by the SD of the response when the
    response can be extracted, and keeps 0.1 silently otherwise. Other
    numerators are resolved through their family.
    """
    if classify(model.numerator) is not ModelFamily.LINEAR:
        return negligible_effect(model, model.numerator)

    try:
        factor = response_sd(model.get_response())
    except Exception:
        factor = 1.0
    if not np.isfinite(factor):
        factor = 1.0
    return RopeEstimate(NEGLIGIBLE * factor)


def estimate_rope(model) -> RopeEstimate | list[RopeEstimate]:
    """Negligible effect size(s) for any model, without emitting warnings.

    Returns one estimate per response for multivariate and multi-response
    models, in response order, otherwise a single estimate.
    """
    if isinstance(model, BayesFactorModel):
        return bayes_factor_effect(model)

    if not isinstance(model, FittedModel):
        return RopeEstimate(NEGLIGIBLE)

    if model.is_multivariate:
        return [negligible_effect(sub, sub.info, sub.response) for sub in model.submodels]

    response = model.response
    if isinstance(response, np.ndarray) and response.ndim == 2:
        response = pd.DataFrame(response)
    if isinstance(response, pd.DataFrame) and response.shape[1] > 1:
        return [negligible_effect(model, model.info, response[col]) for col in response]

    return negligible_effect(model, model.info, response)


def rope_range(model) -> RopeInterval | list[RopeInterval]:
    """Find default ROPE bounds for a model.

    Args:
        model: FittedModel, BayesFactorModel, or any other object (which
            gets the generic default)

    Returns:
        (lower, upper) with lower == -upper, or a list of them (one per
        response) for multivariate and multi-response models.

    Warns:
        RopeRangeWarning: once per response whose estimate fell back to 0.1

    Example:
        >>> rope_range(FittedModel(info=ModelInfo(is_correlation=True)))
        (-0.05, 0.05)
    """
    estimate = estimate_rope(model)
    estimates = estimate if isinstance(estimate, list) else [estimate]

    for e in estimates:
        if e.message is not None:
            warnings.warn(e.message, RopeRangeWarning, stacklevel=2)

    if isinstance(estimate, list):
        return [e.interval for e in estimates]
    return estimate.interval
