"""A track with a determined momentum."""

from __future__ import annotations

import math

from .branch_config import BranchConfig, _as_types
from .constants import UNDEF_VALUE_FLOAT, TrackFields, Types
from .container import Container, _cast, _format_float
from .pdg import mass_by_pdg

UNDEF_CHARGE = -1000


def _half_log_ratio(a: float, b: float) -> float:
    """Return 0.5*log(a/b), giving inf or nan where the ratio is degenerate."""
    if b == 0:
        if a > 0:
            return math.inf
        if a < 0:
            return -math.inf
        return math.nan
    ratio = a / b
    if ratio < 0:
        return math.nan
    if ratio == 0:
        return -math.inf
    return 0.5 * math.log(ratio)


class Track(Container):
    """A track with momentum components, charge and user fields."""

    def __init__(self, id: int = 0, branch: BranchConfig | None = None) -> None:
        super().__init__(id, branch)
        self.px = UNDEF_VALUE_FLOAT
        self.py = UNDEF_VALUE_FLOAT
        self.pz = UNDEF_VALUE_FLOAT
        self.charge = UNDEF_CHARGE

    def set_momentum(self, px: float, py: float, pz: float) -> None:
        self.px = float(px)
        self.py = float(py)
        self.pz = float(pz)

    @property
    def momentum(self) -> tuple[float, float, float]:
        return (self.px, self.py, self.pz)

    @property
    def pt(self) -> float:
        return math.sqrt(self.px * self.px + self.py * self.py)

    @property
    def phi(self) -> float:
        return math.atan2(self.py, self.px)

    @property
    def p(self) -> float:
        return math.sqrt(self.px * self.px + self.py * self.py + self.pz * self.pz)

    @property
    def eta(self) -> float:
        p = self.p
        return _half_log_ratio(p + self.pz, p - self.pz)

    def rapidity(self, pdg: int) -> float:
        """Return the rapidity under the mass hypothesis of a PDG code."""
        return self.rapidity_by_mass(mass_by_pdg(pdg))

    def rapidity_by_mass(self, mass: float) -> float:
        """Return the rapidity under a mass hypothesis in GeV/c^2."""
        p = self.p
        e = math.sqrt(mass * mass + p * p)
        return _half_log_ratio(e + self.pz, e - self.pz)

    def _predefined_getters(self) -> dict:
        return {
            TrackFields.PHI: lambda: self.phi,
            TrackFields.PT: lambda: self.pt,
            TrackFields.ETA: lambda: self.eta,
            TrackFields.P: lambda: self.p,
            TrackFields.PX: lambda: self.px,
            TrackFields.PY: lambda: self.py,
            TrackFields.PZ: lambda: self.pz,
            TrackFields.Q: lambda: self.charge,
            TrackFields.ID: lambda: self.id,
        }

    def get_field(self, field_id: int, field_type=Types.FLOAT):
        """Return a user field or, for negative ids, a predefined one."""
        field_type = _as_types(field_type)
        if field_id >= 0:
            return super().get_field(field_id, field_type)
        getter = self._predefined_getters().get(field_id)
        if getter is None:
            raise IndexError(f"Track field index {field_id} is not found")
        return _cast(getter(), field_type)

    def set_field(self, value, field_id: int, field_type=None) -> None:
        """Store a user field or, for negative ids, a predefined one.

        The id and derived quantities cannot be set; such calls are ignored.
        """
        if field_id >= 0:
            super().set_field(value, field_id, field_type)
            return
        momenta = {TrackFields.PX: "px", TrackFields.PY: "py", TrackFields.PZ: "pz"}
        if field_id in momenta:
            setattr(self, momenta[field_id], float(value))
        elif field_id == TrackFields.Q:
            self.charge = int(value)
        elif field_id not in (
            TrackFields.ID,
            TrackFields.P,
            TrackFields.PT,
            TrackFields.ETA,
            TrackFields.PHI,
        ):
            raise ValueError(f"Unknown field {field_id}")

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Track):
            return NotImplemented
        return (
            self.id == other.id
            and self.px == other.px
            and self.py == other.py
            and self.pz == other.pz
        )

    __hash__ = None

    def describe(self) -> str:
        return (
            f" Px = {_format_float(self.px)}  Py = {_format_float(self.py)}"
            f"  Pz = {_format_float(self.pz)}  phi = {_format_float(self.phi)}"
            f"  pT = {_format_float(self.pt)}  eta = {_format_float(self.eta)}\n"
        ) + super().describe()