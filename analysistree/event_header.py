"""Event-wise information: vertex position plus user fields."""

from __future__ import annotations

from collections.abc import Iterator

from .branch_config import BranchConfig, _as_types
from .constants import UNDEF_VALUE_FLOAT, EventHeaderFields, Types, field_type_of
from .container import Container, _cast, _format_float


class EventHeader(Container):
    """A container for one event; behaves like a detector with a single channel."""

    def __init__(self, id: int = 0, branch: BranchConfig | None = None) -> None:
        super().__init__(id, branch)
        self._vertex = [UNDEF_VALUE_FLOAT] * 3

    @property
    def vertex_x(self) -> float:
        return self._vertex[0]

    @property
    def vertex_y(self) -> float:
        return self._vertex[1]

    @property
    def vertex_z(self) -> float:
        return self._vertex[2]

    @property
    def vertex_position(self) -> tuple[float, float, float]:
        return tuple(self._vertex)

    def set_vertex_position(self, x: float, y: float, z: float) -> None:
        self._vertex = [float(x), float(y), float(z)]

    def get_field(self, field_id: int, field_type=Types.FLOAT):
        """Return a user field or, for negative ids, a predefined one."""
        field_type = _as_types(field_type)
        if field_id >= 0:
            return super().get_field(field_id, field_type)
        getters = {
            EventHeaderFields.VERTEX_X: lambda: self.vertex_x,
            EventHeaderFields.VERTEX_Y: lambda: self.vertex_y,
            EventHeaderFields.VERTEX_Z: lambda: self.vertex_z,
            EventHeaderFields.ID: lambda: self.id,
        }
        getter = getters.get(field_id)
        if getter is None:
            raise IndexError(f"EventHeader field index {field_id} is not found")
        return _cast(getter(), field_type)

    def set_field(self, value, field_id: int, field_type=None) -> None:
        """Store a user field or, for negative ids, a predefined one."""
        if field_id >= 0:
            super().set_field(value, field_id, field_type)
            return
        if field_type is None:
            field_type = field_type_of(value)
        vertex_index = {
            EventHeaderFields.VERTEX_X: 0,
            EventHeaderFields.VERTEX_Y: 1,
            EventHeaderFields.VERTEX_Z: 2,
        }
        if field_id in vertex_index:
            self._vertex[vertex_index[field_id]] = float(value)
        elif field_id != EventHeaderFields.ID:
            raise ValueError(f"Invalid field id {field_id}")

    def channel(self, i: int) -> EventHeader:
        """Return the header itself for channel 0."""
        if i == 0:
            return self
        raise IndexError(f"EventHeader channel {i} != 0")

    def __len__(self) -> int:
        return 1

    def __iter__(self) -> Iterator[EventHeader]:
        """The header is its own only channel."""
        yield self

    def clear_channels(self) -> None:
        raise TypeError("Not available for EventHeader")

    def add_channel(self, branch: BranchConfig | None = None) -> EventHeader:
        raise TypeError("Not available for EventHeader")

    def describe(self) -> str:
        x, y, z = (_format_float(v) for v in self._vertex)
        return f"{x} {y} {z}\n" + super().describe()