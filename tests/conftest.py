"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # End-to-end conversion tests
    pytest -m slow          # Tests that take >1s

Fixtures are centralized in tests/fixtures/ for reuse across all test modules.
"""

import pytest
import json
import logging
import sys
import os
from pathlib import Path

# IMPORTANT: Patch tenacity's sleep function BEFORE any other imports
# This must happen before tenacity.Retrying class is defined (which captures defaults)
import tenacity.nap
tenacity.nap.sleep = lambda seconds: None

# Add src to path for imports
src_dir = os.path.join(os.path.dirname(__file__), '..', 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# Add tests directory to path for fixtures import
tests_dir = os.path.dirname(__file__)
if tests_dir not in sys.path:
    # Ensure src directory stays ahead of tests for module resolution
    sys.path.insert(1, tests_dir)

# Import centralized fixtures
from fixtures import (
    CITY_NODES_CSV,
    CITY_EDGES_CSV,
    CITY_CONFIG,
    CITY_CONFIG_WITH_TRANSFORMATION,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: End-to-end conversion tests")
    config.addinivalue_line("markers", "slow: Tests that take more than 1 second")


# =============================================================================
# CSV Fixtures
# =============================================================================

@pytest.fixture
def write_csv(tmp_path):
    """Write CSV content to a file below tmp_path and return its path."""
    def _write(name, content, directory=None):
        target_dir = Path(directory) if directory else tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_text(content, encoding='utf-8')
        return path
    return _write


@pytest.fixture
def city_input_dir(tmp_path, write_csv):
    """Input directory containing the city nodes and edges."""
    input_dir = tmp_path / "csv"
    write_csv("city-nodes.csv", CITY_NODES_CSV, input_dir)
    write_csv("city-edges.csv", CITY_EDGES_CSV, input_dir)
    return input_dir


@pytest.fixture
def output_dir(tmp_path):
    """Empty output directory."""
    path = tmp_path / "rdf"
    path.mkdir()
    return path


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def write_config(tmp_path):
    """Write a configuration dict as JSON and return its path."""
    def _write(config, name="csv2rdf.json"):
        path = tmp_path / name
        path.write_text(json.dumps(config, indent=2), encoding='utf-8')
        return path
    return _write


@pytest.fixture
def city_config_file(write_config):
    """Configuration file for the city example."""
    return write_config(CITY_CONFIG)


@pytest.fixture
def city_transformation_config_file(write_config):
    """City example configuration with a URI post transformation."""
    return write_config(CITY_CONFIG_WITH_TRANSFORMATION, name="csv2rdf-transform.json")


# =============================================================================
# Logging Fixtures
# =============================================================================

@pytest.fixture
def reset_logging():
    """Remove handlers installed by setup_logging after the test."""
    yield
    from csv2rdf.cli import helpers
    helpers.reset_logging()
    logging.getLogger().setLevel(logging.WARNING)
