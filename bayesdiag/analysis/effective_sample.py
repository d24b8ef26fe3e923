"""Effective sample size (ESS) per posterior parameter."""

from collections.abc import Sequence
from dataclasses import dataclass

import arviz as az
import pandas as pd

from bayesdiag.analysis.extraction import (
    filter_parameters,
    flatten_names,
    get_trace,
    select_var_names,
)


@dataclass
class EssConfig:
    """Configuration for the ArviZ ESS estimator.

    Attributes:
        method: ESS method passed to az.ess ("bulk", "tail", "mean", ...)
        relative: Return ESS divided by the number of draws
    """

    method: str = "bulk"
    relative: bool = False


def effective_sample(
    model,
    effects: str = "fixed",
    component: str = "conditional",
    parameters: str | Sequence[str] | None = None,
    config: EssConfig | None = None,
) -> pd.DataFrame:
    """Estimate the effective sample size of each posterior parameter.

    Parameters are selected and named exactly as in get_parameters(), so
    the result lines up with the extracted draws.

    Args:
        model: Model with a posterior trace
        effects: "fixed", "random" or "all"
        component: "conditional", "zi"/"zero_inflated" or "all"
        parameters: Regular expression (or list of them) to select parameters
        config: ESS configuration (uses defaults if None)

    Returns:
        DataFrame with columns Parameter and ESS.

    """
    if config is None:
        config = EssConfig()

    trace = get_trace(model)
    var_names = select_var_names(model, effects, component)

    names: list[str] = []
    values: list[float] = []
    if var_names:
        ess = az.ess(
            trace,
            var_names=var_names,
            method=config.method,
            relative=config.relative,
        )
        for var_name in var_names:
            estimate = ess[var_name]
            names.extend(flatten_names(var_name, estimate.shape))
            values.extend(float(v) for v in estimate.to_numpy().reshape(-1))

    table = pd.DataFrame({"Parameter": names, "ESS": values})
    keep = filter_parameters(names, parameters)
    return table[table["Parameter"].isin(keep)].reset_index(drop=True)
