import pytest

from hashtable import table as htable


@pytest.fixture
def empty_hash() -> htable.Hash:
    return htable.Hash()


@pytest.fixture
def abc_hash() -> htable.Hash:
    return htable.h(a=1, b=2, c=3)
