"""
Shared fixtures: small ArviZ traces and fitted model records.

No sampling happens in the test suite; traces are built from random draws
with az.from_dict.
"""

import arviz as az
import numpy as np
import pytest

from bayesdiag.models import FittedModel, ModelInfo


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def trace(rng):
    """Two chains of 200 draws: scalars, a coefficient vector, random and zi parts."""
    return az.from_dict(
        posterior={
            "alpha": rng.normal(size=(2, 200)),
            "beta": rng.normal(size=(2, 200, 2)),
            "sigma": np.abs(rng.normal(1.5, 0.1, size=(2, 200))),
            "u": rng.normal(size=(2, 200, 3)),
            "psi": rng.uniform(size=(2, 200)),
        }
    )


@pytest.fixture
def fitted(trace):
    return FittedModel(
        info=ModelInfo(is_linear=True),
        trace=trace,
        response=np.array([2.0, 4.0, 6.0]),
        sigma=1.5,
        random_effects=("u",),
        zero_inflated=("psi",),
    )
