import pytest

from analysistree.branch_config import BranchConfig
from analysistree.constants import UNDEF_VALUE_FLOAT, DetType, EventHeaderFields, Types
from analysistree.event_header import EventHeader


def test_basics():
    header = EventHeader()
    assert header.size(int) == 0
    assert header.size(float) == 0
    assert header.size(bool) == 0

    header.set_vertex_position(1.0, 2.0, 3.0)
    assert header.vertex_x == pytest.approx(1.0)
    assert header.vertex_y == pytest.approx(2.0)
    assert header.vertex_z == pytest.approx(3.0)


def test_default_vertex_is_undefined():
    assert EventHeader().vertex_position == (UNDEF_VALUE_FLOAT,) * 3


def test_predefined_fields_match_vertex():
    header = EventHeader(4)
    header.set_vertex_position(1.0, 2.0, 3.0)
    assert header.get_field(EventHeaderFields.VERTEX_X) == header.vertex_x
    assert header.get_field(EventHeaderFields.VERTEX_Y) == header.vertex_y
    assert header.get_field(EventHeaderFields.VERTEX_Z) == header.vertex_z
    assert header.get_field(EventHeaderFields.ID, Types.INTEGER) == 4


def test_set_predefined_fields_round_trip():
    header = EventHeader()
    header.set_field(5.5, EventHeaderFields.VERTEX_Z)
    header.set_field(7, EventHeaderFields.ID)
    assert header.vertex_z == 5.5
    assert header.id == 0


def test_unknown_predefined_field_raises():
    header = EventHeader()
    with pytest.raises(IndexError):
        header.get_field(-10)
    with pytest.raises(ValueError):
        header.set_field(1.0, -10)


def test_user_fields_through_branch():
    branch = BranchConfig("SimEventHeader", DetType.EVENT_HEADER)
    branch.add_field("b", Types.FLOAT)
    header = EventHeader(0, branch)
    b_id = branch.field_id("b")
    header.set_field(2.5, b_id)
    assert header.get_field(b_id) == 2.5


def test_single_channel_behaviour():
    header = EventHeader()
    assert len(header) == 1
    assert header.channel(0) is header
    assert list(header) == [header]
    with pytest.raises(IndexError):
        header.channel(1)


def test_channel_modification_not_available():
    header = EventHeader()
    with pytest.raises(TypeError):
        header.clear_channels()
    with pytest.raises(TypeError):
        header.add_channel()


def test_describe_starts_with_vertex():
    header = EventHeader()
    header.set_vertex_position(1.0, 2.0, 3.0)
    assert header.describe().startswith("1 2 3\n")