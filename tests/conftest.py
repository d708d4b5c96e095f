import importlib
import pytest

@pytest.fixture(scope="session")
def logic():
    return importlib.import_module("wiegand_converter.logic")

@pytest.fixture(scope="session")
def errors():
    return importlib.import_module("wiegand_converter.errors")
