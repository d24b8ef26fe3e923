"""Post-sampling diagnostics for fitted Bayesian models.

Includes:
- ROPE: default Region Of Practical Equivalence per model family
- MCSE: Monte Carlo Standard Error per parameter
- ESS: effective sample size per parameter
- Extraction: get posterior draws from traces
"""

from bayesdiag.analysis.diagnostics import check_mcse
from bayesdiag.analysis.effective_sample import EssConfig, effective_sample
from bayesdiag.analysis.extraction import get_parameters
from bayesdiag.analysis.mcse import compute_mcse, mcse
from bayesdiag.analysis.rope_range import (
    RopeEstimate,
    RopeEstimationError,
    RopeRangeWarning,
    classify,
    estimate_rope,
    negligible_effect,
    rope_range,
)

__all__ = [
    "check_mcse",
    "classify",
    "compute_mcse",
    "effective_sample",
    "EssConfig",
    "estimate_rope",
    "get_parameters",
    "mcse",
    "negligible_effect",
    "rope_range",
    "RopeEstimate",
    "RopeEstimationError",
    "RopeRangeWarning",
]
