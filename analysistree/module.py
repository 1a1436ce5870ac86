"""Modules of a segmented detector and their positions."""

from __future__ import annotations

import math

from .branch_config import BranchConfig, _as_types
from .constants import UNDEF_VALUE_FLOAT, UNDEF_VALUE_SHORT, ModuleFields, Types
from .container import Container, _cast, _format_float
from .indexed import IndexedObject


class Module(Container):
    """A detector module with a number, a signal and user fields."""

    def __init__(self, id: int = 0, branch: BranchConfig | None = None) -> None:
        super().__init__(id, branch)
        self.signal = 0.0
        self.number = UNDEF_VALUE_SHORT

    def get_field(self, field_id: int, field_type=Types.FLOAT):
        """Return a user field or, for negative ids, a predefined one."""
        field_type = _as_types(field_type)
        if field_id >= 0:
            return super().get_field(field_id, field_type)
        getters = {
            ModuleFields.NUMBER: lambda: self.number,
            ModuleFields.SIGNAL: lambda: self.signal,
            ModuleFields.ID: lambda: self.id,
        }
        getter = getters.get(field_id)
        if getter is None:
            raise IndexError(f"Module field index {field_id} is not found")
        return _cast(getter(), field_type)

    def set_field(self, value, field_id: int, field_type=None) -> None:
        """Store a user field or, for negative ids, a predefined one."""
        if field_id >= 0:
            super().set_field(value, field_id, field_type)
        elif field_id == ModuleFields.SIGNAL:
            self.signal = float(value)
        elif field_id == ModuleFields.NUMBER:
            self.number = int(value)
        elif field_id != ModuleFields.ID:
            raise ValueError(f"Unknown field {field_id}")

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Module):
            return NotImplemented
        return self.id == other.id and self.number == other.number and self.signal == other.signal

    __hash__ = None

    def describe(self) -> str:
        return (
            f"  number = {self.number}  signal = {_format_float(self.signal)}\n"
            + super().describe()
        )


class ModulePosition(IndexedObject):
    """Position of a detector module in a local coordinate system."""

    def __init__(
        self,
        id: int = 0,
        x: float = UNDEF_VALUE_FLOAT,
        y: float = UNDEF_VALUE_FLOAT,
        z: float = UNDEF_VALUE_FLOAT,
    ) -> None:
        super().__init__(id)
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

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

    def describe(self) -> str:
        return (
            f"  x = {_format_float(self.x)}  y = {_format_float(self.y)}"
            f"  z = {_format_float(self.z)}  phi = {_format_float(self.phi)}\n"
        )