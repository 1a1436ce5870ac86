import pytest

from analysistree.indexed import IndexedObject


def test_default_id_is_zero():
    assert IndexedObject().id == 0


def test_id_given_at_creation():
    assert IndexedObject(1).id == 1


def test_equality_by_id():
    assert IndexedObject(1) == IndexedObject(1)
    assert not (IndexedObject(1) == IndexedObject(2))
    assert IndexedObject(1) != IndexedObject(2)


def test_not_equal_to_other_types():
    assert (IndexedObject(1) == 1) is False


def test_id_is_read_only():
    obj = IndexedObject(5)
    with pytest.raises(AttributeError):
        obj.id = 3
    assert obj.id == 5


def test_hash_consistent_with_equality():
    assert len({IndexedObject(3), IndexedObject(3), IndexedObject(4)}) == 2