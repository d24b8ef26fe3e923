"""Monte Carlo Standard Error (MCSE).

MCSE is the posterior standard deviation divided by the square root of
the effective sample size (Kruschke 2015, p. 187). It "provides a
quantitative suggestion of how big the estimation noise is".

Reference: Kruschke, J. (2014). Doing Bayesian data analysis: A tutorial
with R, JAGS, and Stan. Academic Press.
"""

from collections.abc import Mapping, Sequence
from dataclasses import replace

import numpy as np
import pandas as pd

from bayesdiag.analysis.effective_sample import EssConfig, effective_sample
from bayesdiag.analysis.extraction import get_parameters


def _ess_series(ess: pd.DataFrame | pd.Series | Mapping[str, float]) -> pd.Series:
    """ESS indexed by parameter name."""
    if isinstance(ess, pd.DataFrame):
        return pd.Series(ess["ESS"].to_numpy(dtype=float), index=ess["Parameter"])
    if isinstance(ess, pd.Series):
        return ess.astype(float)
    return pd.Series(dict(ess), dtype=float)


def compute_mcse(
    draws: pd.DataFrame,
    ess: pd.DataFrame | pd.Series | Mapping[str, float],
) -> pd.DataFrame:
    """Compute the MCSE of each parameter from its draws and its ESS.

    Parameters present in only one of the inputs are dropped; the result
    follows the column order of `draws`. An ESS of zero gives an infinite
    MCSE.

    Args:
        draws: Posterior draws, one column per parameter
        ess: Effective sample sizes, as a Parameter/ESS table, a Series or
            a mapping keyed by parameter name

    Returns:
        DataFrame with columns Parameter and MCSE.

    """
    stddev = draws.std()
    ess = _ess_series(ess)

    common = [name for name in stddev.index if name in ess.index]
    stddev = stddev[common].to_numpy(dtype=float)
    ess = ess[common].to_numpy(dtype=float)

    with np.errstate(divide="ignore", invalid="ignore"):
        values = stddev / np.sqrt(ess)

    return pd.DataFrame({"Parameter": common, "MCSE": values})


def mcse(
    model,
    effects: str = "fixed",
    component: str = "conditional",
    parameters: str | Sequence[str] | None = None,
    config: EssConfig | None = None,
) -> pd.DataFrame:
    """Monte Carlo Standard Error of each posterior parameter of a model.

    Draws and ESS are computed with the same filters, then joined on the
    parameter name.

    Args:
        model: Model with a posterior trace
        effects: "fixed", "random" or "all"
        component: "conditional", "zi"/"zero_inflated" or "all"
        parameters: Regular expression (or list of them) to select parameters
        config: ESS configuration (uses defaults if None); `relative` is
            ignored, the MCSE needs the absolute ESS

    Returns:
        DataFrame with columns Parameter and MCSE.

    Example:
        fitted = from_pymc(model, trace)
        mcse(fitted, effects="all")
    """
    if config is None:
        config = EssConfig()
    config = replace(config, relative=False)

    params = get_parameters(
        model,
        effects=effects,
        component=component,
        parameters=parameters,
    )
    ess = effective_sample(
        model,
        effects=effects,
        component=component,
        parameters=parameters,
        config=config,
    )
    return compute_mcse(params, ess)
