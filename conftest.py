# conftest.py
import os
import gc

import matplotlib
import pytest

# Headless plotting for plotter tests
os.environ.setdefault("MPLBACKEND", "Agg")


def pytest_configure():
    matplotlib.use("Agg", force=True)


@pytest.fixture(scope="session", autouse=True)
def disable_gc_for_pytest():
    gc.disable()
    yield
    gc.enable()
