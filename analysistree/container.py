"""Generic storage of integer, floating and boolean fields of one object."""

from __future__ import annotations

from .branch_config import BranchConfig, _as_types
from .constants import Types, field_type_of
from .indexed import IndexedObject

_CASTS = {Types.FLOAT: float, Types.INTEGER: int, Types.BOOL: bool}
_DEFAULTS = {Types.FLOAT: 0.0, Types.INTEGER: 0, Types.BOOL: False}


def _cast(value, field_type: Types):
    """Convert a value to the Python type that stores the given field type."""
    return _CASTS[field_type](value)


def _format_float(value: float) -> str:
    return f"{value:g}"


class Container(IndexedObject):
    """Indexed object holding one list of values per field type."""

    def __init__(self, id: int = 0, branch: BranchConfig | None = None) -> None:
        super().__init__(id)
        self._values: dict[Types, list] = {t: [] for t in _CASTS}
        if branch is not None:
            self.init(branch)

    def init(self, branch: BranchConfig) -> None:
        """Size the value lists to hold every user field of a branch."""
        for field_type, values in self._values.items():
            size = branch.size(field_type)
            if len(values) > size:
                del values[size:]
            else:
                values.extend([_DEFAULTS[field_type]] * (size - len(values)))

    def vector(self, field_type) -> list:
        """Return the list of values of one field type."""
        return self._values[_as_types(field_type)]

    def _check_index(self, values: list, field_id: int) -> None:
        if not 0 <= field_id < len(values):
            raise IndexError(
                f"field id {field_id} out of range for {len(values)} stored values"
            )

    def set_field(self, value, field_id: int, field_type=None) -> None:
        """Store a value; without a field type it is chosen from the value."""
        field_type = field_type_of(value) if field_type is None else _as_types(field_type)
        values = self._values[field_type]
        self._check_index(values, field_id)
        values[field_id] = _cast(value, field_type)

    def get_field(self, field_id: int, field_type=Types.FLOAT):
        """Return the stored value of one field."""
        values = self._values[_as_types(field_type)]
        self._check_index(values, field_id)
        return values[field_id]

    def size(self, field_type) -> int:
        return len(self._values[_as_types(field_type)])

    def describe(self) -> str:
        """Return the stored values as printable lines."""
        lines = []
        ints = self._values[Types.INTEGER]
        floats = self._values[Types.FLOAT]
        bools = self._values[Types.BOOL]
        if ints:
            lines.append("Integer fields: " + "".join(f"{i} " for i in ints) + "\n")
        if floats:
            lines.append("Floating fields: " + "".join(f"{_format_float(f)} " for f in floats) + "\n")
        if bools:
            lines.append("Boolean fields: " + "".join(f"{int(b)} " for b in bools) + "\n")
        return "".join(lines)