import pytest

from splitledger.core.store import GroupStore


@pytest.fixture
def store():
    return GroupStore()
