"""Masses and charges of particles looked up by PDG code."""

from __future__ import annotations

from typing import NamedTuple

_ION_THRESHOLD = 1_000_000_000
_NUCLEON_MASS = 0.938  # GeV, per nucleon for ions


class _Species(NamedTuple):
    mass: float  # GeV/c^2
    charge: int  # units of the elementary charge
    self_conjugate: bool = False


_TABLE: dict[int, _Species] = {
    # leptons
    11: _Species(0.00051099895, -1),
    12: _Species(0.0, 0),
    13: _Species(0.1056583755, -1),
    14: _Species(0.0, 0),
    15: _Species(1.77686, -1),
    16: _Species(0.0, 0),
    # gauge bosons
    22: _Species(0.0, 0, True),
    # light mesons
    111: _Species(0.1349768, 0, True),
    211: _Species(0.13957039, 1),
    113: _Species(0.77526, 0, True),
    213: _Species(0.77511, 1),
    221: _Species(0.547862, 0, True),
    223: _Species(0.78266, 0, True),
    331: _Species(0.95778, 0, True),
    333: _Species(1.019461, 0, True),
    # strange mesons
    130: _Species(0.497611, 0, True),
    310: _Species(0.497611, 0, True),
    311: _Species(0.497611, 0),
    321: _Species(0.493677, 1),
    313: _Species(0.89555, 0),
    323: _Species(0.89166, 1),
    # charm mesons
    411: _Species(1.86966, 1),
    421: _Species(1.86484, 0),
    431: _Species(1.96835, 1),
    443: _Species(3.0969, 0, True),
    # baryons
    2212: _Species(0.93827208816, 1),
    2112: _Species(0.93956542052, 0),
    2224: _Species(1.232, 2),
    2214: _Species(1.232, 1),
    2114: _Species(1.232, 0),
    1114: _Species(1.232, -1),
    3122: _Species(1.115683, 0),
    3222: _Species(1.18937, 1),
    3212: _Species(1.192642, 0),
    3112: _Species(1.197449, -1),
    3322: _Species(1.31486, 0),
    3312: _Species(1.32171, -1),
    3334: _Species(1.67245, -1),
    4122: _Species(2.28646, 1),
}


def _lookup(pdg: int) -> _Species | None:
    species = _TABLE.get(pdg)
    if species is not None:
        return species
    base = _TABLE.get(-pdg)
    if base is None or base.self_conjugate:
        return None
    return _Species(base.mass, -base.charge)


def mass_by_pdg(pdg: int) -> float:
    """Return the mass in GeV/c^2 of the species with the given PDG code.

    Ion codes of the form 100ZZZAAAI get A nucleon masses.
    """
    if pdg > _ION_THRESHOLD:
        a = (pdg % 10000) // 10
        return a * _NUCLEON_MASS
    species = _lookup(pdg)
    if species is None:
        raise ValueError(f"Mass of {pdg} is not known")
    return species.mass


def charge_by_pdg(pdg: int) -> int:
    """Return the charge in units of e of the species with the given PDG code."""
    if pdg > _ION_THRESHOLD:
        return (pdg % 10_000_000) // 10000
    species = _lookup(pdg)
    if species is None:
        raise ValueError(f"Charge of {pdg} is not known")
    return species.charge