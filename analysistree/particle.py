"""A particle: a track with an identified species, mass and charge."""

from __future__ import annotations

import math

from .branch_config import BranchConfig, _as_types
from .constants import ParticleFields, Types
from .container import Container, _cast
from .pdg import charge_by_pdg, mass_by_pdg
from .track import UNDEF_CHARGE, Track

UNDEF_MASS = -1000.0


class Particle(Track):
    """A track with a PDG code; mass and charge follow from it unless set."""

    def __init__(self, id: int = 0, branch: BranchConfig | None = None) -> None:
        super().__init__(id, branch)
        self._mass = UNDEF_MASS
        self.pid = 0
        self._explicit_allowed = False

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def energy(self) -> float:
        p = self.p
        return math.sqrt(self._mass * self._mass + p * p)

    @property
    def kinetic_energy(self) -> float:
        return self.energy - self._mass

    def rapidity(self, pdg: int | None = None) -> float:
        """Return the rapidity from the particle's own mass, or from a PDG hypothesis."""
        if pdg is None:
            return self.rapidity_by_mass(self._mass)
        return super().rapidity(pdg)

    def set_pid(self, pid: int) -> None:
        """Set the PDG code, filling mass and charge if they are still unset."""
        self.pid = int(pid)
        if self._mass == UNDEF_MASS:
            self._mass = mass_by_pdg(self.pid)
        if self.charge == UNDEF_CHARGE:
            self.charge = charge_by_pdg(self.pid)

    def set_mass(self, mass: float) -> None:
        self.check_explicit_mass_and_charge_allowed()
        self._mass = float(mass)

    def set_charge(self, charge: int) -> None:
        self.check_explicit_mass_and_charge_allowed()
        self.charge = int(charge)

    def allow_explicit_mass_and_charge(self, allowed: bool = True) -> None:
        self._explicit_allowed = allowed

    def check_explicit_mass_and_charge_allowed(self) -> None:
        """Raise unless explicit mass and charge assignment has been unblocked."""
        if not self._explicit_allowed:
            raise RuntimeError(
                "mass and charge of the particle are set automatically with set_pid() "
                "(unless they were already assigned, incl. when copied from a track). "
                "Use set_mass() and set_charge() only to set them different from "
                "PDG-true values; call allow_explicit_mass_and_charge() to unblock this."
            )

    def get_field(self, field_id: int, field_type=Types.FLOAT):
        """Return a user field or, for negative ids, a predefined one."""
        field_type = _as_types(field_type)
        if field_id >= 0:
            return Container.get_field(self, field_id, field_type)
        getters = {
            ParticleFields.PHI: lambda: self.phi,
            ParticleFields.PT: lambda: self.pt,
            ParticleFields.RAPIDITY: lambda: self.rapidity(),
            ParticleFields.PID: lambda: self.pid,
            ParticleFields.MASS: lambda: self._mass,
            ParticleFields.ETA: lambda: self.eta,
            ParticleFields.P: lambda: self.p,
            ParticleFields.ENERGY: lambda: self.energy,
            ParticleFields.KINETIC_ENERGY: lambda: self.kinetic_energy,
            ParticleFields.PX: lambda: self.px,
            ParticleFields.PY: lambda: self.py,
            ParticleFields.PZ: lambda: self.pz,
            ParticleFields.Q: lambda: self.charge,
            ParticleFields.ID: lambda: self.id,
        }
        getter = getters.get(field_id)
        if getter is None:
            raise IndexError(f"Particle field index {field_id} is not found")
        return _cast(getter(), field_type)

    def set_field(self, value, field_id: int, field_type=None) -> None:
        """Store a user field or, for negative ids, a predefined one.

        The id and derived quantities cannot be set; such calls are ignored.
        """
        if field_id >= 0:
            Container.set_field(self, value, field_id, field_type)
            return
        momenta = {ParticleFields.PX: "px", ParticleFields.PY: "py", ParticleFields.PZ: "pz"}
        if field_id in momenta:
            setattr(self, momenta[field_id], float(value))
        elif field_id == ParticleFields.MASS:
            self._mass = float(value)
        elif field_id == ParticleFields.Q:
            self.charge = int(value)
        elif field_id == ParticleFields.PID:
            self.set_pid(int(value))
        elif field_id not in (
            ParticleFields.ID,
            ParticleFields.P,
            ParticleFields.ENERGY,
            ParticleFields.KINETIC_ENERGY,
            ParticleFields.PT,
            ParticleFields.ETA,
            ParticleFields.PHI,
            ParticleFields.RAPIDITY,
        ):
            raise ValueError(f"Particle field index {field_id} is not found")