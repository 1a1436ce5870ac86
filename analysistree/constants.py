"""Shared constants, detector types, value types and predefined field ids."""

from __future__ import annotations

from enum import IntEnum

UNDEF_VALUE_FLOAT = -999.0
UNDEF_VALUE_SHORT = -999
UNDEF_VALUE_INT = -999
SMALL_NUMBER = 1e-6
HUGE_NUMBER = 1e9


class DetType(IntEnum):
    """Kind of object stored in a branch."""

    HIT = 0
    MODULE = 1
    TRACK = 2
    EVENT_HEADER = 3
    PARTICLE = 4
    GENERIC = 5


class Types(IntEnum):
    """Storage type of a user-defined field."""

    FLOAT = 0
    INTEGER = 1
    BOOL = 2


class TrackFields(IntEnum):
    """Ids of the predefined fields of a track."""

    PHI = -1
    PT = -2
    ETA = -3
    PX = -4
    PY = -5
    PZ = -6
    P = -7
    Q = -8
    ID = -9


class ParticleFields(IntEnum):
    """Ids of the predefined fields of a particle."""

    PHI = -1
    PT = -2
    RAPIDITY = -3
    PID = -4
    MASS = -5
    ETA = -6
    PX = -7
    PY = -8
    PZ = -9
    P = -10
    ENERGY = -11
    KINETIC_ENERGY = -12
    Q = -13
    ID = -14


class HitFields(IntEnum):
    """Ids of the predefined fields of a hit."""

    PHI = -1
    SIGNAL = -2
    X = -3
    Y = -4
    Z = -5
    ID = -6


class ModuleFields(IntEnum):
    """Ids of the predefined fields of a module."""

    NUMBER = -1
    SIGNAL = -2
    ID = -3


class EventHeaderFields(IntEnum):
    """Ids of the predefined fields of an event header."""

    VERTEX_X = -1
    VERTEX_Y = -2
    VERTEX_Z = -3
    ID = -4


def field_type_of(value) -> Types:
    """Return the field type that stores a Python value of this kind."""
    # bool is a subclass of int, so it must be checked first
    if isinstance(value, bool):
        return Types.BOOL
    if isinstance(value, int):
        return Types.INTEGER
    if isinstance(value, float):
        return Types.FLOAT
    raise TypeError(f"no field type for value of type {type(value).__name__}")