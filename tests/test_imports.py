"""
test_imports.py
---------------

Tests that the public API is importable from the top-level package.
"""


def test_top_level_api_imports():
    import bayesdiag as b

    for name in [
        "rope_range",
        "mcse",
        "compute_mcse",
        "effective_sample",
        "get_parameters",
        "check_mcse",
        "negligible_effect",
        "classify",
        "FittedModel",
        "BayesFactorModel",
        "ModelInfo",
        "ModelFamily",
        "from_pymc",
        "EssConfig",
        "RopeEstimate",
        "RopeRangeWarning",
    ]:
        assert hasattr(b, name)
