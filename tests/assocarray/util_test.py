import pytest

from assocarray.util import partition


@pytest.mark.parametrize(
    "coll,n,parts",
    [
        ((), 2, []),
        ((1,), 2, [(1,)]),
        ((1, 2), 2, [(1, 2)]),
        ((1, 2, 3), 2, [(1, 2), (3,)]),
        ((1, 2, 3, 4), 2, [(1, 2), (3, 4)]),
        ([1, 2, 3, 4, 5, 6], 3, [(1, 2, 3), (4, 5, 6)]),
    ],
)
def test_partition(coll, n, parts):
    assert parts == list(partition(coll, n))
