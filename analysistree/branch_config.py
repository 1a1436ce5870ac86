"""Description of the fields stored in one branch."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, replace

from .constants import (
    DetType,
    EventHeaderFields,
    HitFields,
    ModuleFields,
    ParticleFields,
    TrackFields,
    Types,
)


@dataclass(frozen=True)
class ConfigElement:
    """Id and description of one field."""

    id: int = 0
    title: str = ""


_PY_TYPES = {float: Types.FLOAT, int: Types.INTEGER, bool: Types.BOOL}

# Lookup order used when searching a field by name.
_SEARCH_ORDER = (Types.INTEGER, Types.FLOAT, Types.BOOL)

_DEFAULT_FIELDS = {
    DetType.TRACK: [
        ("px", Types.FLOAT, TrackFields.PX, "X-projection of the momentum of the track, GeV/c"),
        ("py", Types.FLOAT, TrackFields.PY, "Y-projection of the momentum of the track, GeV/c"),
        ("pz", Types.FLOAT, TrackFields.PZ, "Z-projection of the momentum of the track, GeV/c"),
        ("pT", Types.FLOAT, TrackFields.PT, "Transverse momentum of the track, GeV/c"),
        ("phi", Types.FLOAT, TrackFields.PHI, "Azimuthal angle of the track, rad"),
        ("eta", Types.FLOAT, TrackFields.ETA, "Pseudorapidity of the track"),
        ("p", Types.FLOAT, TrackFields.P, "Full momentum of the track, GeV/c"),
        ("q", Types.INTEGER, TrackFields.Q, "Charge of the track (or its sign when absolute value unknown)"),
        ("id", Types.INTEGER, TrackFields.ID, "Unique id of the track within current event; assigned automatically (not by user)"),
    ],
    DetType.PARTICLE: [
        ("px", Types.FLOAT, ParticleFields.PX, "X-projection of the momentum of the particle, GeV/c"),
        ("py", Types.FLOAT, ParticleFields.PY, "Y-projection of the momentum of the particle, GeV/c"),
        ("pz", Types.FLOAT, ParticleFields.PZ, "Z-projection of the momentum of the particle, GeV/c"),
        ("pT", Types.FLOAT, ParticleFields.PT, "Transverse momentum of the particle, GeV/c"),
        ("phi", Types.FLOAT, ParticleFields.PHI, "Azimuthal angle of the particle, rad"),
        ("eta", Types.FLOAT, ParticleFields.ETA, "Pseudorapidity of the particle"),
        ("mass", Types.FLOAT, ParticleFields.MASS, "Mass of the particle, GeV/c^2 (true mass of certain particle species; deprecated to use for invariant mass, mass from TOF etc.)"),
        ("p", Types.FLOAT, ParticleFields.P, "Full momentum of the particle, GeV/c"),
        ("E", Types.FLOAT, ParticleFields.ENERGY, "Full energy of the particle, GeV"),
        ("T", Types.FLOAT, ParticleFields.KINETIC_ENERGY, "Kinetic energy of the particle, GeV"),
        ("rapidity", Types.FLOAT, ParticleFields.RAPIDITY, "Rapidity of the particle"),
        ("q", Types.INTEGER, ParticleFields.Q, "Charge of the particle (true charge of certain particle species)"),
        ("pid", Types.INTEGER, ParticleFields.PID, "PDG code of the particle (e.g. by simulation for MC-particles or the most probable one for reconstructed particles with performed PID etc.)"),
        ("id", Types.INTEGER, ParticleFields.ID, "Unique id of the particle within current event; assigned automatically (not by user)"),
    ],
    DetType.HIT: [
        ("x", Types.FLOAT, HitFields.X, "X coordinate of the hit, cm"),
        ("y", Types.FLOAT, HitFields.Y, "Y coordinate of the hit, cm"),
        ("z", Types.FLOAT, HitFields.Z, "Z coordinate of the hit, cm"),
        ("phi", Types.FLOAT, HitFields.PHI, "Azimuthal angle of the hit, rad"),
        ("signal", Types.FLOAT, HitFields.SIGNAL, "Energy deposit collected in the hit"),
        ("id", Types.INTEGER, HitFields.ID, "Unique id of the hit within current event; assigned automatically (not by user)"),
    ],
    DetType.MODULE: [
        ("number", Types.INTEGER, ModuleFields.NUMBER, "Module number"),
        ("signal", Types.FLOAT, ModuleFields.SIGNAL, "Energy deposit collected in the module"),
        ("id", Types.INTEGER, ModuleFields.ID, "Unique id of the hit within current event; assigned automatically (not by user)"),
    ],
    DetType.EVENT_HEADER: [
        ("vtx_x", Types.FLOAT, EventHeaderFields.VERTEX_X, "X coordinate of the vertex, cm"),
        ("vtx_y", Types.FLOAT, EventHeaderFields.VERTEX_Y, "Y coordinate of the vertex, cm"),
        ("vtx_z", Types.FLOAT, EventHeaderFields.VERTEX_Z, "Z coordinate of the vertex, cm"),
        ("id", Types.INTEGER, EventHeaderFields.ID, "Always 0, this field is not used for EventHeader and is needed for compatibility with other Container types"),
    ],
}


def branch_id_for(name: str) -> int:
    """Return the stable 64-bit id derived from a branch name."""
    digest = hashlib.blake2b(name.encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "little")


def _as_types(field_type) -> Types:
    if isinstance(field_type, Types):
        return field_type
    if field_type in _PY_TYPES:
        return _PY_TYPES[field_type]
    return Types(field_type)


def _table(fields: dict[str, ConfigElement]) -> str:
    if not fields:
        return ""
    width = max(len(name) for name in fields) + 4
    rows = [("Id", "Name", "Info")]
    for name in sorted(fields):
        element = fields[name]
        first, *rest = element.title.split("\n")
        rows.append((str(element.id), name, first))
        rows.extend(("", "", piece) for piece in rest)
    return "".join(f"{a:<10}{b:<{width}}{c:<50}\n" for a, b, c in rows)


class BranchConfig:
    """Names, ids and descriptions of the fields of one branch."""

    def __init__(self, name: str, det_type: DetType, title: str = "") -> None:
        self._name = name
        self._det_type = DetType(det_type)
        self.title = title
        self._id = branch_id_for(name)
        self._fields: dict[Types, dict[str, ConfigElement]] = {t: {} for t in Types}
        self._sizes: dict[Types, int] = {t: 0 for t in Types}
        for field_name, field_type, field_id, field_title in _DEFAULT_FIELDS.get(self._det_type, ()):
            self._fields[field_type][field_name] = ConfigElement(int(field_id), field_title)

    @property
    def name(self) -> str:
        return self._name

    @property
    def id(self) -> int:
        return self._id

    @property
    def det_type(self) -> DetType:
        return self._det_type

    def _guarantee_vacancy(self, name: str) -> None:
        if self.has_field(name):
            raise ValueError(f"field {name} already exists")

    def add_field(self, name: str, field_type=Types.FLOAT, title: str = "", field_id: int | None = None) -> None:
        """Add a field; without an explicit id it takes the next free one."""
        field_type = _as_types(field_type)
        self._guarantee_vacancy(name)
        if field_id is None:
            field_id = self._sizes[field_type]
            self._sizes[field_type] += 1
        self._fields[field_type].setdefault(name, ConfigElement(field_id, title))

    def add_fields(self, names, field_type=Types.FLOAT, title: str = "") -> None:
        """Add several fields of one type sharing a title."""
        field_type = _as_types(field_type)
        names = list(names)
        for name in names:
            self._guarantee_vacancy(name)
        fields = self._fields[field_type]
        for name in names:
            fields.setdefault(name, ConfigElement(self._sizes[field_type], title))
            self._sizes[field_type] += 1

    def remove_field(self, name: str) -> None:
        """Remove a user field; ids above it move down by one."""
        if not self.has_field(name):
            raise KeyError(f"no field {name} to be removed")
        field_type = self.field_type(name)
        removed_id = self.field_id(name)
        if removed_id < 0:
            raise ValueError(f"default field {name} cannot be removed")
        fields = self._fields[field_type]
        del fields[name]
        for key, element in fields.items():
            if element.id > removed_id:
                fields[key] = replace(element, id=element.id - 1)

    def remove_fields(self, names) -> None:
        for name in names:
            self.remove_field(name)

    def _find(self, name: str) -> tuple[Types, ConfigElement] | None:
        for field_type in _SEARCH_ORDER:
            element = self._fields[field_type].get(name)
            if element is not None:
                return field_type, element
        return None

    def field_type(self, name: str) -> Types | None:
        """Return the type of a field, or None if there is no such field."""
        found = self._find(name)
        return found[0] if found else None

    def field_id(self, name: str) -> int | None:
        """Return the id of a field, or None if there is no such field."""
        found = self._find(name)
        return found[1].id if found else None

    def has_field(self, name: str) -> bool:
        return self._find(name) is not None

    def fields(self, field_type) -> dict[str, ConfigElement]:
        """Return the fields of one type, ordered by name."""
        fields = self._fields[_as_types(field_type)]
        return {name: fields[name] for name in sorted(fields)}

    def size(self, field_type) -> int:
        """Return the number of storage slots allotted to one type."""
        return self._sizes[_as_types(field_type)]

    def field_names(self, field_type) -> list[str]:
        return sorted(self._fields[_as_types(field_type)])

    def clone(self, name: str, det_type: DetType) -> BranchConfig:
        """Return a copy with another name and/or detector type."""
        result = BranchConfig(name, det_type)
        for field_type in (Types.FLOAT, Types.INTEGER, Types.BOOL):
            for field_name, element in self.fields(field_type).items():
                if element.id >= 0:
                    result.add_field(field_name, field_type, element.title, element.id)
        result._sizes = dict(self._sizes)
        return result

    def clone_and_merge(self, attached: BranchConfig) -> BranchConfig:
        """Return a copy extended with the fields of another branch, prefixed with its name."""
        other = attached.name
        result = self.clone(f"{self.name}_{other}", self.det_type)
        for field_type in (Types.FLOAT, Types.INTEGER, Types.BOOL):
            for field_name, element in attached.fields(field_type).items():
                result.add_field(f"{other}_{field_name}", field_type, f"{other}: {element.title}")
        if DetType.EVENT_HEADER not in (self.det_type, attached.det_type):
            result.add_field(
                "matching_case",
                Types.INTEGER,
                "0 - both present, 1 - only first present, 2 - only second present",
            )
        return result

    def describe(self) -> str:
        """Return a printable table of all fields."""
        bools = self._fields[Types.BOOL]
        empty = " no boolean fields in this branch" if not bools else ""
        return (
            f"Branch {self.name} ({self.title}) consists of:\n"
            "\nFloating fields:\n"
            + _table(self._fields[Types.FLOAT])
            + "\nInteger fields:\n"
            + _table(self._fields[Types.INTEGER])
            + f"\nBoolean fields:{empty}\n\n"
            + _table(bools)
        )

    def describe_id(self) -> str:
        return f"Branch {self.name} (id={self.id})\n"

    def __repr__(self) -> str:
        return f"BranchConfig(name={self.name!r}, det_type={self.det_type.name})"