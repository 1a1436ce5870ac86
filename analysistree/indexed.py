"""Base class for objects that carry an index within their collection."""

from __future__ import annotations


class IndexedObject:
    """An object with an id, set at creation, that is its position in a collection."""

    __slots__ = ("_id",)

    def __init__(self, id: int = 0) -> None:
        self._id = id

    @property
    def id(self) -> int:
        return self._id

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, IndexedObject):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id})"