"""
pytest configuration and fixtures for Quote Service tests
"""

import json
import random
import shutil
import sys
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from api.app import create_app
from store import Quote, QuoteStore, DEFAULT_QUOTES


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture
def sample_quotes():
    """Sample quote set with a shared category"""
    return (
        Quote(id=10, text="Simplicity is prerequisite for reliability.", author="Edsger Dijkstra", category="software"),
        Quote(id=20, text="Well begun is half done.", author="Aristotle", category="life"),
        Quote(id=30, text="Premature optimization is the root of all evil.", author="Donald Knuth", category="software"),
        Quote(id=40, text="Stay hungry, stay foolish.", author="Stewart Brand", category="inspiration"),
    )


@pytest.fixture
def quote_store(sample_quotes):
    """Quote store over the sample set with a seeded random source"""
    return QuoteStore(sample_quotes, rng=random.Random(42))


@pytest.fixture
def default_store():
    """Quote store over the built-in quote set"""
    return QuoteStore(DEFAULT_QUOTES, rng=random.Random(7))


@pytest.fixture
def client(default_store):
    """Test client over the built-in quote set"""
    return TestClient(create_app(quote_store=default_store))


@pytest.fixture
def sample_client(quote_store):
    """Test client over the sample quote set"""
    return TestClient(create_app(quote_store=quote_store))


@pytest.fixture
def write_json(temp_dir):
    """Factory writing a JSON document into the temp directory"""
    def _write(name, data):
        path = temp_dir / name
        with open(path, 'w', encoding='utf-8') as f:
            if isinstance(data, str):
                f.write(data)
            else:
                json.dump(data, f)
        return path
    return _write


# Pytest configuration
def pytest_configure(config):
    """Configure pytest"""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
