"""
Pytest configuration and shared fixtures for toonbridge tests.
"""
import pytest

from toonbridge.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Run every test with default settings, unaffected by the caller's env."""
    for name in ("TOONBRIDGE_MAX_INPUT_LENGTH", "TOONBRIDGE_DEBUG", "TOONBRIDGE_MCP_SERVER"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def users():
    """The two-user example used throughout the docs."""
    return [
        {"id": 1, "name": "Alice", "role": "admin"},
        {"id": 2, "name": "Bob", "role": "user"},
    ]


@pytest.fixture
def users_toon():
    return "data[2]{id,name,role}:\n  1,Alice,admin\n  2,Bob,user"


@pytest.fixture
def products():
    return [
        {"id": 1, "name": "Product A", "price": 29.99, "inStock": True},
        {"id": 2, "name": "Product B", "price": 49.99, "inStock": False},
    ]


@pytest.fixture
def products_toon():
    return "data[2]{id,name,price,inStock}:\n  1,Product A,29.99,true\n  2,Product B,49.99,false"
