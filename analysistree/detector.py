"""A collection of channels of one kind belonging to a detector or branch."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from .branch_config import BranchConfig
from .indexed import IndexedObject

T = TypeVar("T", bound=IndexedObject)


class Detector(IndexedObject, Generic[T]):
    """An indexed list of channels; each channel's id is its position in the list."""

    __slots__ = ("_channel_type", "_channels")

    def __init__(self, channel_type: type[T], id: int = 0) -> None:
        super().__init__(id)
        self._channel_type = channel_type
        self._channels: list[T] = []

    @property
    def channel_type(self) -> type[T]:
        return self._channel_type

    def add_channel(self, branch: BranchConfig | None = None) -> T:
        """Append a new channel whose id is the current number of channels."""
        number = len(self._channels)
        if branch is None:
            channel = self._channel_type(number)
        else:
            channel = self._channel_type(number, branch)
        self._channels.append(channel)
        return channel

    def clear_channels(self) -> None:
        self._channels.clear()

    def channel(self, number: int) -> T:
        """Return the channel with the given number."""
        if not 0 <= number < len(self._channels):
            raise IndexError(
                f"wrong channel number {number}. "
                f"Number of channels in this detector is {len(self._channels)}"
            )
        return self._channels[number]

    def __len__(self) -> int:
        return len(self._channels)

    def __iter__(self) -> Iterator[T]:
        return iter(self._channels)

    def __getitem__(self, number: int) -> T:
        return self.channel(number)

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Detector):
            return NotImplemented
        return self.id == other.id and self._channels == other._channels

    __hash__ = None

    def describe(self) -> str:
        """Return the descriptions of all channels, one after another."""
        return "".join(channel.describe() for channel in self._channels)

    def __repr__(self) -> str:
        return (
            f"Detector({self._channel_type.__name__}, id={self.id}, "
            f"channels={len(self._channels)})"
        )