"""Index matching between the channels of two branches."""

from __future__ import annotations

from collections.abc import Mapping

from .constants import UNDEF_VALUE_INT


class Matching:
    """Pairs of channel ids linking a channel of one branch to a channel of another."""

    def __init__(
        self,
        branch1_id: int = 0,
        branch2_id: int = 0,
        match: Mapping[int, int] | None = None,
        match_inverted: Mapping[int, int] | None = None,
    ) -> None:
        self._branch1_id = branch1_id
        self._branch2_id = branch2_id
        self._match: dict[int, int] = dict(match or {})
        self._match_inverted: dict[int, int] = dict(match_inverted or {})

    @property
    def branch1_id(self) -> int:
        return self._branch1_id

    @property
    def branch2_id(self) -> int:
        return self._branch2_id

    def add_match(self, id1: int, id2: int) -> None:
        """Record that channel id1 of the first branch matches channel id2 of the second.

        An id that already has a match keeps its first one.
        """
        self._match.setdefault(id1, id2)
        self._match_inverted.setdefault(id2, id1)

    def match_direct(self, id: int) -> int:
        """Return the id in the second branch matched to id, or UNDEF_VALUE_INT."""
        return self._match.get(id, UNDEF_VALUE_INT)

    def match_inverted(self, id: int) -> int:
        """Return the id in the first branch matched to id, or UNDEF_VALUE_INT."""
        return self._match_inverted.get(id, UNDEF_VALUE_INT)

    def get_match(self, id: int, inverted: bool = False) -> int:
        return self.match_inverted(id) if inverted else self.match_direct(id)

    def matches(self, inverted: bool = False) -> dict[int, int]:
        """Return the matches in one direction, ordered by key."""
        source = self._match_inverted if inverted else self._match
        return {key: source[key] for key in sorted(source)}

    def clear(self) -> None:
        self._match.clear()
        self._match_inverted.clear()

    def set_matches(self, match: Mapping[int, int], match_inverted: Mapping[int, int]) -> None:
        self._match = dict(match)
        self._match_inverted = dict(match_inverted)

    def __repr__(self) -> str:
        return (
            f"Matching(branch1_id={self._branch1_id}, branch2_id={self._branch2_id}, "
            f"n_matches={len(self._match)})"
        )