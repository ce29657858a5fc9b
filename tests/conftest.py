import importlib
import pytest

@pytest.fixture(scope="session")
def conv():
    return importlib.import_module("nibblekit.logic")
