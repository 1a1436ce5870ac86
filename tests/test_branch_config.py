import pytest

from analysistree.branch_config import BranchConfig, ConfigElement, branch_id_for
from analysistree.constants import DetType, TrackFields, Types


@pytest.mark.parametrize(
    "det_type",
    [DetType.TRACK, DetType.MODULE, DetType.PARTICLE, DetType.HIT, DetType.EVENT_HEADER],
)
def test_basics_user_fields(det_type):
    config = BranchConfig("RecTrack", det_type)
    config.add_field("test_f", Types.FLOAT, "just a test field")
    config.add_field("test_i", Types.INTEGER, "just a test field")
    config.add_field("test_b", Types.BOOL, "just a test field")

    assert config.field_id("test_i") == 0
    assert config.field_id("test_b") == 0
    assert config.field_id("test_f") == 0

    assert config.field_type("test_f") is Types.FLOAT
    assert config.field_type("test_i") is Types.INTEGER
    assert config.field_type("test_b") is Types.BOOL


def test_track_default_fields():
    config = BranchConfig("RecTrack", DetType.TRACK)
    assert config.field_id("pT") == TrackFields.PT
    assert config.field_id("phi") == TrackFields.PHI
    assert config.field_id("eta") == TrackFields.ETA
    assert config.field_id("p") == TrackFields.P
    assert config.field_id("px") == TrackFields.PX
    assert config.field_id("py") == TrackFields.PY
    assert config.field_id("pz") == TrackFields.PZ
    assert config.field_type("q") is Types.INTEGER
    assert config.size(Types.FLOAT) == 0


def test_python_types_accepted():
    config = BranchConfig("b", DetType.GENERIC)
    config.add_field("a", float)
    config.add_field("n", int)
    config.add_field("flag", bool)
    assert config.field_type("a") is Types.FLOAT
    assert config.field_type("n") is Types.INTEGER
    assert config.field_type("flag") is Types.BOOL


def test_missing_field():
    config = BranchConfig("b", DetType.GENERIC)
    assert config.field_id("nope") is None
    assert config.field_type("nope") is None
    assert not config.has_field("nope")


def test_duplicate_field_rejected_across_types():
    config = BranchConfig("b", DetType.TRACK)
    config.add_field("x", Types.FLOAT)
    with pytest.raises(ValueError):
        config.add_field("x", Types.INTEGER)
    with pytest.raises(ValueError):
        config.add_field("pT", Types.FLOAT)


def test_add_fields_sequential_ids():
    config = BranchConfig("b", DetType.GENERIC)
    config.add_field("first", Types.INTEGER)
    config.add_fields(["int_field1", "int_field2"], Types.INTEGER, "just for test")
    assert config.field_id("int_field1") == 1
    assert config.field_id("int_field2") == 2
    assert config.size(Types.INTEGER) == 3
    assert config.fields(Types.INTEGER)["int_field2"] == ConfigElement(2, "just for test")


def test_add_fields_checks_all_before_adding():
    config = BranchConfig("b", DetType.GENERIC)
    config.add_field("taken", Types.FLOAT)
    with pytest.raises(ValueError):
        config.add_fields(["fresh", "taken"], Types.FLOAT)
    assert not config.has_field("fresh")


def test_explicit_id_does_not_grow_size():
    config = BranchConfig("b", DetType.GENERIC)
    config.add_field("a", Types.FLOAT, "", 7)
    assert config.field_id("a") == 7
    assert config.size(Types.FLOAT) == 0


def test_remove_field_shifts_ids():
    config = BranchConfig("b", DetType.GENERIC)
    config.add_fields(["a", "b", "c"], Types.FLOAT)
    config.remove_field("a")
    assert not config.has_field("a")
    assert config.field_id("b") == 0
    assert config.field_id("c") == 1


def test_remove_fields():
    config = BranchConfig("b", DetType.GENERIC)
    config.add_fields(["a", "b", "c"], Types.INTEGER)
    config.remove_fields(["a", "c"])
    assert config.field_names(Types.INTEGER) == ["b"]
    assert config.field_id("b") == 0


def test_remove_missing_field_raises():
    config = BranchConfig("b", DetType.GENERIC)
    with pytest.raises(KeyError):
        config.remove_field("absent")


def test_remove_default_field_raises():
    config = BranchConfig("b", DetType.TRACK)
    with pytest.raises(ValueError):
        config.remove_field("px")
    assert config.has_field("px")


def test_field_names_sorted():
    config = BranchConfig("b", DetType.GENERIC)
    config.add_fields(["zeta", "alpha", "mid"], Types.BOOL)
    assert config.field_names(Types.BOOL) == ["alpha", "mid", "zeta"]
    assert list(config.fields(Types.BOOL)) == ["alpha", "mid", "zeta"]


def test_branch_id_stable_and_from_name():
    assert branch_id_for("RecTrack") == branch_id_for("RecTrack")
    assert branch_id_for("RecTrack") != branch_id_for("SimTrack")
    assert BranchConfig("RecTrack", DetType.TRACK).id == branch_id_for("RecTrack")


def test_clone_keeps_user_fields_and_sizes():
    config = BranchConfig("SimParticles", DetType.PARTICLE)
    config.add_field("extra", Types.FLOAT, "extra field")
    config.add_field("flag", Types.BOOL)
    clone = config.clone("NewParticles", DetType.PARTICLE)
    assert clone.name == "NewParticles"
    assert clone.det_type is DetType.PARTICLE
    assert clone.fields(Types.FLOAT) == config.fields(Types.FLOAT)
    assert clone.size(Types.FLOAT) == config.size(Types.FLOAT)
    assert clone.size(Types.BOOL) == config.size(Types.BOOL)
    clone.add_field("float_field", Types.FLOAT)
    assert clone.field_id("float_field") == 1
    assert not config.has_field("float_field")


def test_clone_with_other_type_drops_default_fields():
    config = BranchConfig("t", DetType.TRACK)
    config.add_field("dca", Types.FLOAT)
    clone = config.clone("g", DetType.GENERIC)
    assert clone.field_names(Types.FLOAT) == ["dca"]
    assert not clone.has_field("pT")


def test_clone_and_merge():
    first = BranchConfig("A", DetType.GENERIC)
    first.add_field("f", Types.FLOAT)
    second = BranchConfig("B", DetType.GENERIC)
    second.add_field("g", Types.FLOAT, "gee")
    merged = first.clone_and_merge(second)
    assert merged.name == "A_B"
    assert merged.field_id("f") == 0
    assert merged.field_id("B_g") == 1
    assert merged.fields(Types.FLOAT)["B_g"].title == "B: gee"
    assert merged.field_type("matching_case") is Types.INTEGER


def test_clone_and_merge_with_event_header_has_no_matching_case():
    header = BranchConfig("Ev", DetType.EVENT_HEADER)
    tracks = BranchConfig("Tr", DetType.TRACK)
    merged = tracks.clone_and_merge(header)
    assert not merged.has_field("matching_case")
    assert merged.has_field("Ev_vtx_x")
    assert merged.field_id("Ev_vtx_x") >= 0


def test_title_settable():
    config = BranchConfig("b", DetType.GENERIC, "first")
    config.title = "second"
    assert config.title == "second"


def test_describe_contents():
    config = BranchConfig("RecTrack", DetType.GENERIC, "tracks")
    config.add_field("dcax", Types.FLOAT, "cm")
    config.add_field("note", Types.INTEGER, "line one\nline two")
    text = config.describe()
    assert text.startswith("Branch RecTrack (tracks) consists of:\n")
    assert "Boolean fields: no boolean fields in this branch" in text
    lines = text.splitlines()
    assert any(line.startswith("0") and "dcax" in line and "cm" in line for line in lines)
    continuation = [line for line in lines if "line two" in line]
    assert len(continuation) == 1
    assert continuation[0].lstrip().startswith("line two")


def test_describe_id():
    config = BranchConfig("RecTrack", DetType.TRACK)
    assert config.describe_id() == f"Branch RecTrack (id={config.id})\n"