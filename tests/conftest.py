import pytest

from inventory import store


@pytest.fixture(autouse=True)
def fresh_inventory():
    store.reset()
    yield store
    store.reset()
