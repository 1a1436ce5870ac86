"""Run-wise information: collision system, beam and detector geometry."""

from __future__ import annotations

import math

from .constants import UNDEF_VALUE_FLOAT
from .container import _format_float
from .detector import Detector
from .module import ModulePosition

NUCLEON_MASS = 0.938


class DataHeader:
    """Static information shared by every event of a data set."""

    def __init__(self) -> None:
        self._modules_pos: list[Detector[ModulePosition]] = []
        self._det_pos: list[tuple[float, float, float]] = []
        self.system = ""
        self._beam_mom = UNDEF_VALUE_FLOAT
        self._beam_y = UNDEF_VALUE_FLOAT
        self._sqrt_snn = UNDEF_VALUE_FLOAT
        self.time_slice_length = UNDEF_VALUE_FLOAT

    @property
    def beam_momentum(self) -> float:
        return self._beam_mom

    @property
    def beam_rapidity(self) -> float:
        return self._beam_y

    @property
    def sqrt_snn(self) -> float:
        return self._sqrt_snn

    def add_detector(self) -> Detector[ModulePosition]:
        """Add a set of module positions for a new detector and return it."""
        detector = Detector(ModulePosition, len(self._modules_pos))
        self._modules_pos.append(detector)
        return detector

    def set_beam_momentum(
        self,
        momentum: float,
        m_target: float = NUCLEON_MASS,
        m_beam: float = NUCLEON_MASS,
    ) -> None:
        """Set the beam momentum per nucleon and derive sqrt(s_NN) and beam rapidity."""
        self._beam_mom = float(momentum)
        energy_lab = math.sqrt(m_beam * m_beam + self._beam_mom * self._beam_mom)
        self._sqrt_snn = math.sqrt(
            m_target * m_target + m_beam * m_beam + 2 * m_target * energy_lab
        )
        e = self._sqrt_snn / 2
        p = math.sqrt(e * e - m_target * m_target)
        self._beam_y = math.log((e + p) / (e - p)) / 2.0

    def add_detector_position(self, x: float, y: float, z: float) -> None:
        self._det_pos.append((float(x), float(y), float(z)))

    def detector_position(self, i: int) -> tuple[float, float, float]:
        if not 0 <= i < len(self._det_pos):
            raise IndexError(f"no detector position {i}")
        return self._det_pos[i]

    def module_positions(self, idet: int) -> Detector[ModulePosition]:
        if not 0 <= idet < len(self._modules_pos):
            raise IndexError(f"no module positions for detector {idet}")
        return self._modules_pos[idet]

    def module_phi(self, det_id: int, module_id: int) -> float:
        """Return the azimuthal angle of one module of one detector."""
        return self.module_positions(det_id).channel(module_id).phi

    def describe(self) -> str:
        """Return a printable summary, followed by all module positions."""
        text = (
            "DataHeader\n"
            f" Collision system is {self.system}\n"
            f" at beam momentum {_format_float(self._beam_mom)}"
            f" (sqrt(s_NN) = {_format_float(self._sqrt_snn)})\n"
            f" beam rapidity is {_format_float(self._beam_y)}\n"
            f"TimeSlice length : {_format_float(self.time_slice_length)}\n"
        )
        return text + "".join(det.describe() for det in self._modules_pos)

    def __repr__(self) -> str:
        return f"DataHeader(system={self.system!r}, detectors={len(self._modules_pos)})"