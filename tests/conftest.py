"""
Pytest configuration and fixtures for the algorithm lab tests.

This file contains shared fixtures and configuration for all test modules.
"""

import random
import sys
from pathlib import Path

import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def _natural_order(a, b):
    return (a > b) - (a < b)


@pytest.fixture
def ascending():
    """Ascending comparator for plain values."""
    return _natural_order


@pytest.fixture
def descending():
    """Descending comparator for plain values."""
    return lambda a, b: -_natural_order(a, b)


@pytest.fixture
def sample_numbers():
    """The small unsorted dataset used across sort and search tests."""
    return [5, 3, 8, 1]


@pytest.fixture
def random_numbers():
    """A reproducible shuffled list with duplicates."""
    rng = random.Random(1234)
    return [rng.randint(0, 50) for _ in range(200)]


@pytest.fixture
def sample_students():
    """A handful of valid students, not sorted on any field."""
    from records.student import Student

    return [
        Student("S003", "Charlie Brown", 7.0),
        Student("S001", "Alice Johnson", 9.5),
        Student("S004", "Diana Prince", 6.2),
        Student("S002", "Bob Smith", 8.2),
    ]


@pytest.fixture
def service(sample_students):
    """A StudentService holding the sample students."""
    from records.service import StudentService

    svc = StudentService()
    for student in sample_students:
        svc.add_student(student.id, student.name, student.mark)
    return svc


# Configure pytest markers
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


# Custom collection modifiers
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Mark integration tests
        if "integration" in item.nodeid or "test_integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)

        # Mark slow tests (tests that might take longer)
        if any(keyword in item.nodeid for keyword in ["stress", "exhaustive"]):
            item.add_marker(pytest.mark.slow)

        # Mark unit tests (default for most tests)
        if not any(
            marker.name in ["integration", "slow"] for marker in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)


# Pytest options
def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow", action="store_true", default=False, help="run slow tests"
    )


def pytest_runtest_setup(item):
    """Setup for individual test runs."""
    # Skip slow tests unless --run-slow is passed
    if "slow" in item.keywords and not item.config.getoption("--run-slow"):
        pytest.skip("need --run-slow option to run")
