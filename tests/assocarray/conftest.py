import pytest

from assocarray import AssociativeArray, associative_array


@pytest.fixture
def empty() -> AssociativeArray:
    return AssociativeArray()


@pytest.fixture
def abc() -> AssociativeArray:
    return associative_array("a", 1, "b", 2, "c", 3)
