"""
Kernel test configuration.

Shared fixtures: a small list of people keyed by name, the way most
callers key records, plus the key and filter functions that go with it.
"""

import pytest

from listdata.kernel.index import ItemsByKey
from listdata.kernel.types import ListState


def _by_name(item):
    return item["name"]


def _name_contains(item, filter_text):
    return filter_text in item["name"]


@pytest.fixture
def get_key():
    return _by_name


@pytest.fixture
def name_filter():
    return _name_contains


@pytest.fixture
def people():
    return [{"name": "David"}, {"name": "Sam"}, {"name": "Julia"}]


@pytest.fixture
def keys():
    return ItemsByKey(_by_name)


@pytest.fixture
def state(people):
    return ListState(items=people)
