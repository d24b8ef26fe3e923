"""Sampling precision checks built on the MCSE."""

from collections.abc import Sequence

import pandas as pd

from bayesdiag.analysis.effective_sample import EssConfig
from bayesdiag.analysis.extraction import get_parameters
from bayesdiag.analysis.mcse import mcse


def check_mcse(
    model,
    max_ratio: float = 0.05,
    effects: str = "fixed",
    component: str = "conditional",
    parameters: str | Sequence[str] | None = None,
    config: EssConfig | None = None,
) -> pd.DataFrame:
    """Check the MCSE of each parameter relative to its posterior sd.

    Ratios above `max_ratio` (5% by default) suggest too few effective
    samples for a reliable posterior mean. Prints the worst ratio and one
    line per flagged parameter.

    Returns:
        DataFrame with columns Parameter, MCSE, SD and Ratio.

    """

    def warn(w: bool) -> str:
        return "--- THERE BE DRAGONS ---> " if w else ""

    table = mcse(model, effects, component, parameters, config)
    sd = get_parameters(model, effects, component, parameters).std()
    table["SD"] = sd.reindex(table["Parameter"]).to_numpy()
    table["Ratio"] = table["MCSE"] / table["SD"]

    if table.empty:
        print("MCSE check skipped (no parameters selected).")
        return table

    statistic = table["Ratio"].max()
    print(f"{warn(statistic > max_ratio)}Maximum MCSE/sd ratio: {statistic:0.3f}")

    for row in table[table["Ratio"] > max_ratio].itertuples(index=False):
        print(
            f"*** WARNING: Parameter '{row.Parameter}' has MCSE/sd ratio "
            f"{row.Ratio:0.3f}. Consider drawing more samples! ***"
        )

    return table
