"""Pytest configuration and shared fixtures for circle_domain tests."""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so the package imports without install
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from circle_domain import CirclePoint, SubgroupChain, get_field  # noqa: E402
from tests.vectors import Q31  # noqa: E402


@pytest.fixture(scope="session")
def field31():
    return get_field(31)


@pytest.fixture(scope="session")
def chain31(field31):
    return SubgroupChain.build(field31)


@pytest.fixture(scope="session")
def q31(field31):
    """Point (13, 7) of order 16."""
    return CirclePoint(field31, *Q31)


@pytest.fixture(scope="session")
def field127():
    return get_field(127)


@pytest.fixture(scope="session")
def chain127(field127):
    return SubgroupChain.build(field127)
