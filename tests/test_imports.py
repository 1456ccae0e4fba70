def test_imports():
    import importlib

    # pandas
    import pandas as pd

    assert getattr(pd, "__version__", None)

    # pastpapers package and its public API
    pkg = importlib.import_module("pastpapers")
    for name in ("search", "recent_papers", "get_details", "download"):
        assert callable(getattr(pkg, name))

    for module in (
        "pastpapers.core.scraping.prefect_tasks",
        "pastpapers.flows.papers_flow",
        "pastpapers.services.storage",
    ):
        assert importlib.import_module(module) is not None
