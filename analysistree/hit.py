"""A detector hit: a position with a deposited signal."""

from __future__ import annotations

import math

from .branch_config import BranchConfig, _as_types
from .constants import UNDEF_VALUE_FLOAT, HitFields, Types
from .container import Container, _cast, _format_float


class Hit(Container):
    """A hit with coordinates, signal and user fields."""

    def __init__(self, id: int = 0, branch: BranchConfig | None = None) -> None:
        super().__init__(id, branch)
        self.x = UNDEF_VALUE_FLOAT
        self.y = UNDEF_VALUE_FLOAT
        self.z = UNDEF_VALUE_FLOAT
        self.signal = UNDEF_VALUE_FLOAT

    def set_position(self, x: float, y: float, z: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @property
    def position(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def phi(self) -> float:
        return math.atan2(self.y, self.x)

    def get_field(self, field_id: int, field_type=Types.FLOAT):
        """Return a user field or, for negative ids, a predefined one."""
        field_type = _as_types(field_type)
        if field_id >= 0:
            return super().get_field(field_id, field_type)
        getters = {
            HitFields.X: lambda: self.x,
            HitFields.Y: lambda: self.y,
            HitFields.Z: lambda: self.z,
            HitFields.PHI: lambda: self.phi,
            HitFields.SIGNAL: lambda: self.signal,
            HitFields.ID: lambda: self.id,
        }
        getter = getters.get(field_id)
        if getter is None:
            raise IndexError(f"Hit field index {field_id} is not found")
        return _cast(getter(), field_type)

    def set_field(self, value, field_id: int, field_type=None) -> None:
        """Store a user field or, for negative ids, a predefined one.

        The id and the derived phi cannot be set; such calls are ignored.
        """
        if field_id >= 0:
            super().set_field(value, field_id, field_type)
            return
        attributes = {
            HitFields.X: "x",
            HitFields.Y: "y",
            HitFields.Z: "z",
            HitFields.SIGNAL: "signal",
        }
        if field_id in attributes:
            setattr(self, attributes[field_id], float(value))
        elif field_id not in (HitFields.ID, HitFields.PHI):
            raise ValueError(f"Unknown field {field_id}")

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Hit):
            return NotImplemented
        return (
            self.id == other.id
            and self.x == other.x
            and self.y == other.y
            and self.z == other.z
            and self.signal == other.signal
        )

    __hash__ = None

    def describe(self) -> str:
        return (
            f"  x = {_format_float(self.x)}  y = {_format_float(self.y)}"
            f"  z = {_format_float(self.z)}  phi = {_format_float(self.phi)}"
            f"  signal = {_format_float(self.signal)}\n"
        ) + super().describe()