import pytest

from analysistree.branch_config import BranchConfig
from analysistree.constants import DetType, Types
from analysistree.container import Container


@pytest.fixture
def config():
    branch = BranchConfig("RecTrack", DetType.TRACK)
    branch.add_field("test_f", Types.FLOAT, "just a test field")
    branch.add_field("test_i", Types.INTEGER, "just a test field")
    branch.add_field("test_b", Types.BOOL, "just a test field")
    return branch


def test_empty_container_has_no_values():
    container = Container()
    assert container.size(float) == 0
    assert container.size(int) == 0
    assert container.size(bool) == 0


def test_basics(config):
    container = Container()
    container.init(config)
    assert container.size(float) == 1
    assert container.size(int) == 1
    assert container.size(bool) == 1

    container.set_field(1, 0)
    container.set_field(1.0, 0)
    container.set_field(True, 0)

    assert container.get_field(0, float) == 1.0
    assert container.get_field(0, int) == 1
    assert container.get_field(0, bool) is True


def test_constructor_with_branch_sizes_lists(config):
    container = Container(3, config)
    assert container.id == 3
    assert container.vector(Types.FLOAT) == [0.0]
    assert container.vector(Types.INTEGER) == [0]
    assert container.vector(Types.BOOL) == [False]


def test_explicit_type_converts_value(config):
    container = Container(0, config)
    container.set_field(3, 0, Types.FLOAT)
    value = container.get_field(0, Types.FLOAT)
    assert value == 3.0
    assert isinstance(value, float)


def test_out_of_range_access_raises(config):
    container = Container(0, config)
    with pytest.raises(IndexError):
        container.get_field(1, Types.FLOAT)
    with pytest.raises(IndexError):
        container.get_field(-1, Types.INTEGER)
    with pytest.raises(IndexError):
        container.set_field(2.0, 5)


def test_init_keeps_existing_values(config):
    container = Container(0, config)
    container.set_field(7, 0)
    config.add_field("extra_i", Types.INTEGER)
    container.init(config)
    assert container.vector(int) == [7, 0]


def test_describe_lists_values(config):
    container = Container(0, config)
    container.set_field(1, 0)
    container.set_field(True, 0)
    text = container.describe()
    assert "Integer fields: 1 \n" in text
    assert "Boolean fields: 1 \n" in text


def test_equality_by_id():
    assert Container(2) == Container(2)
    assert not Container(1) == Container(2)