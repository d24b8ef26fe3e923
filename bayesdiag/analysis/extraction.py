"""Extract posterior draws from model traces."""

import re
from collections.abc import Sequence

import arviz as az
import numpy as np
import pandas as pd

EFFECTS = ("fixed", "random", "all")
COMPONENTS = ("conditional", "zi", "zero_inflated", "all")


def get_trace(model) -> az.InferenceData:
    """Return the posterior trace of a model.

    Raises:
        ValueError: If the model carries no posterior samples
    """
    trace = getattr(model, "trace", None)
    if trace is None:
        raise ValueError(f"{type(model).__name__} has no posterior trace")
    return trace


def select_var_names(
    model,
    effects: str = "fixed",
    component: str = "conditional",
) -> list[str]:
    """Posterior variable names belonging to the requested model parts.

    Args:
        model: Model with a trace, and optional `random_effects` and
            `zero_inflated` variable name collections
        effects: "fixed", "random" or "all"
        component: "conditional", "zi"/"zero_inflated" or "all"

    Returns:
        Variable names in trace order.

    """
    if effects not in EFFECTS:
        raise ValueError(f"effects must be one of {EFFECTS}, got {effects!r}")
    if component not in COMPONENTS:
        raise ValueError(f"component must be one of {COMPONENTS}, got {component!r}")

    random_effects = set(getattr(model, "random_effects", ()))
    zero_inflated = set(getattr(model, "zero_inflated", ()))
    names = list(get_trace(model).posterior.data_vars)

    if effects == "fixed":
        names = [name for name in names if name not in random_effects]
    elif effects == "random":
        names = [name for name in names if name in random_effects]

    if component == "conditional":
        names = [name for name in names if name not in zero_inflated]
    elif component in ("zi", "zero_inflated"):
        names = [name for name in names if name in zero_inflated]

    return names


def flatten_names(var_name: str, shape: tuple[int, ...]) -> list[str]:
    """Parameter names for each element of a variable, e.g. beta[0], beta[1]."""
    if not shape:
        return [var_name]
    return [
        f"{var_name}[{','.join(str(i) for i in index)}]" for index in np.ndindex(*shape)
    ]


def filter_parameters(
    names: list[str],
    parameters: str | Sequence[str] | None = None,
) -> list[str]:
    """Keep names matching any of the regular expressions in `parameters`."""
    if parameters is None:
        return names
    patterns = [parameters] if isinstance(parameters, str) else list(parameters)
    return [name for name in names if any(re.search(p, name) for p in patterns)]


def get_parameters(
    model,
    effects: str = "fixed",
    component: str = "conditional",
    parameters: str | Sequence[str] | None = None,
) -> pd.DataFrame:
    """Extract posterior draws, one column per (flattened) parameter.

    Chains are stacked, so there is one row per chain/draw pair.
    Vector variables are split into one column per element.

    Args:
        model: Model with a posterior trace
        effects: "fixed", "random" or "all"
        component: "conditional", "zi"/"zero_inflated" or "all"
        parameters: Regular expression (or list of them) to select parameters

    Returns:
        DataFrame with rows=draws, columns=parameters.

    """
    posterior = get_trace(model).posterior
    columns: dict[str, np.ndarray] = {}
    for var_name in select_var_names(model, effects, component):
        values = posterior[var_name].transpose("chain", "draw", ...).to_numpy()
        flat = values.reshape(values.shape[0] * values.shape[1], -1)
        for i, name in enumerate(flatten_names(var_name, values.shape[2:])):
            columns[name] = flat[:, i]

    draws = pd.DataFrame(columns)
    return draws[filter_parameters(list(draws.columns), parameters)]
