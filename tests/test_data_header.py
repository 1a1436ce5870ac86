import math

import pytest

from analysistree.constants import UNDEF_VALUE_FLOAT
from analysistree.data_header import DataHeader


def test_beam_rapidity():
    dh = DataHeader()
    dh.set_beam_momentum(10.0)
    assert dh.beam_rapidity == pytest.approx(1.530965, rel=1e-5)
    assert dh.beam_momentum == 10.0


def test_symmetric_rapidity_relation():
    dh = DataHeader()
    dh.set_beam_momentum(12.0)
    m = 0.938
    e = dh.sqrt_snn / 2
    p = math.sqrt(e * e - m * m)
    assert math.tanh(dh.beam_rapidity) == pytest.approx(p / e)


def test_defaults_undefined():
    dh = DataHeader()
    assert dh.beam_rapidity == UNDEF_VALUE_FLOAT
    assert dh.time_slice_length == UNDEF_VALUE_FLOAT
    assert dh.system == ""


def test_detectors_and_module_phi():
    dh = DataHeader()
    first = dh.add_detector()
    second = dh.add_detector()
    assert first.id == 0
    assert second.id == 1
    second.add_channel().set_position(1.0, 1.0, 0.0)
    assert dh.module_positions(1) is second
    assert dh.module_phi(1, 0) == pytest.approx(math.atan2(1.0, 1.0))
    with pytest.raises(IndexError):
        dh.module_positions(2)
    with pytest.raises(IndexError):
        dh.module_phi(0, 0)


def test_detector_positions():
    dh = DataHeader()
    dh.add_detector_position(1.0, 2.0, 3.0)
    assert dh.detector_position(0) == (1.0, 2.0, 3.0)
    with pytest.raises(IndexError):
        dh.detector_position(1)


def test_describe():
    dh = DataHeader()
    dh.system = "Au+Au"
    dh.set_beam_momentum(12.0)
    dh.add_detector().add_channel().set_position(1.0, 2.0, 3.0)
    text = dh.describe()
    assert "Collision system is Au+Au" in text
    assert "beam momentum 12" in text
    assert "x = 1" in text