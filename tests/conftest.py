"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add repo root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from json_table_converter.flattening import flatten_records
from json_table_converter.records import build_table
from json_table_converter.session import ConverterSession


@pytest.fixture
def people_table():
    """Two-row table with columns [name, age]."""
    return build_table(flatten_records([{"name": "Alice", "age": 30}, {"name": "Bob", "age": 25}]))


@pytest.fixture
def ragged_table():
    """Rows with differing keys, so some cells are missing."""
    return build_table(flatten_records([{"a": 1}, {"b": 2, "a": 3}, {"c": None}]))


@pytest.fixture
def empty_table():
    return build_table(flatten_records([]))


@pytest.fixture
def converted_session():
    return ConverterSession().convert('[{"name": "Alice", "age": 30}, {"name": "Bob", "age": 25}]')
