"""Configuration of a whole tree: its branches and the matchings between them."""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .branch_config import BranchConfig
from .matching import Matching

logger = logging.getLogger(__name__)

MatchingIndex = dict[tuple[str, str], str]


@dataclass(frozen=True)
class MatchingConfig:
    """Names of two matched branches and of the branch holding the matching data."""

    first_branch: str = ""
    second_branch: str = ""
    data_branch: str = ""


class Configuration:
    """Branch configurations keyed by branch id, plus the matchings between branches."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._branches: dict[int, BranchConfig] = {}
        self._matches: list[MatchingConfig] = []
        self._index: MatchingIndex = {}

    def add_branch_config(self, branch: BranchConfig) -> None:
        """Add a branch; a branch whose id is already present is ignored."""
        self._branches.setdefault(branch.id, branch)

    def remove_branch_config(self, branch_name: str) -> None:
        """Remove a branch and every matching that involves it."""
        for branch_id in [i for i, b in self._branches.items() if b.name == branch_name]:
            logger.info("Removing branch: %s", branch_name)
            del self._branches[branch_id]
        for key in [k for k in self._index if branch_name in k]:
            logger.info("Removing matching branch: %s", self._index[key])
            del self._index[key]
        self._matches = self.make_match_configs_from_index(self._index)

    def matches_of_branch(self, branch_name: str) -> list[str]:
        """Return the data branch names of all matchings involving a branch."""
        return [
            m.data_branch
            for m in self._matches
            if branch_name in (m.first_branch, m.second_branch)
        ]

    def add_match(self, match: Matching | MatchingConfig) -> None:
        """Register a matching, given as a Matching object or a MatchingConfig."""
        if isinstance(match, Matching):
            br1 = self.branch_config(match.branch1_id).name
            br2 = self.branch_config(match.branch2_id).name
            self._add_match(br1, br2, f"{br1}2{br2}")
        elif isinstance(match, MatchingConfig):
            self._add_match(match.first_branch, match.second_branch, match.data_branch)
        else:
            raise TypeError(f"cannot add a match from {type(match).__name__}")

    def _add_match(self, br1: str, br2: str, data_branch: str) -> None:
        pair = {br1, br2}
        if any({m.first_branch, m.second_branch} == pair and len(pair) == 2 or
               (m.first_branch, m.second_branch) in ((br1, br2), (br2, br1))
               for m in self._matches):
            warnings.warn(
                f"Matching between branches {br1} and {br2} already exists",
                RuntimeWarning,
                stacklevel=3,
            )
            return
        self._matches.append(MatchingConfig(br1, br2, data_branch))
        self._index = self.make_matching_index(self._matches)

    def branch_config(self, key: str | int) -> BranchConfig:
        """Return a branch config by name or by id."""
        if isinstance(key, str):
            for branch in self._branches.values():
                if branch.name == key:
                    return branch
            raise KeyError(f"no branch {key}")
        try:
            return self._branches[key]
        except KeyError:
            raise KeyError(f"Branch with id = {key} not found") from None

    def branch_configs(self) -> dict[int, BranchConfig]:
        """Return all branch configs ordered by id."""
        return {i: self._branches[i] for i in sorted(self._branches)}

    def matching_configs(self) -> list[MatchingConfig]:
        return list(self._matches)

    def number_of_branches(self) -> int:
        return len(self._branches)

    def match_name(self, br1: str, br2: str) -> str:
        """Return the data branch of the matching from br1 to br2, in that order only."""
        try:
            return self._index[(br1, br2)]
        except KeyError:
            raise KeyError(f"Not found for branches {br1} and {br2}") from None

    def match_info(self, br1: str, br2: str) -> tuple[str, bool]:
        """Return the data branch and whether it was found with the branches swapped."""
        if (br1, br2) in self._index:
            return self._index[(br1, br2)], False
        if (br2, br1) in self._index:
            return self._index[(br2, br1)], True
        raise KeyError(f"Not found for branches {br1} and {br2}")

    def matches(self) -> MatchingIndex:
        """Return the matching index ordered by branch pair."""
        return {key: self._index[key] for key in sorted(self._index)}

    def list_of_branches(self) -> list[str]:
        """Return the names of all branches followed by all matching data branches."""
        names = [b.name for b in self.branch_configs().values()]
        names.extend(self.matches().values())
        return names

    def merge(self, other: Configuration) -> None:
        """Add the branches of another configuration, keeping their ids."""
        for other_id, other_branch in other.branch_configs().items():
            for local in self._branches.values():
                if other_branch.id == local.id:
                    raise ValueError("Configurations contain branches with the same id-s")
                if other_branch.name == local.name:
                    raise ValueError("Configurations contain branches with the same names")
            self._branches.setdefault(other_id, other_branch)

    def describe(self) -> str:
        """Return a printable description of all branches and matchings."""
        parts = [f"This is a {self.name}\n", "The Tree has the following branches:\n"]
        for branch in self.branch_configs().values():
            parts.append("\n")
            parts.append(branch.describe())
        parts.append("\nMatching between branches available\n")
        for (br1, br2), data in self.matches().items():
            parts.append(f"  {br1} {br2} in branch {data}\n")
        return "".join(parts)

    def describe_branch_ids(self) -> str:
        return "".join("\n" + b.describe_id() for b in self.branch_configs().values())

    @staticmethod
    def make_matching_index(matches: Iterable[MatchingConfig]) -> MatchingIndex:
        """Build the index from (first, second) branch names to data branch."""
        result: MatchingIndex = {}
        for match in matches:
            key = (match.first_branch, match.second_branch)
            if key in result:
                raise ValueError("Two matches with same first and second branch added")
            result[key] = match.data_branch
        return {key: result[key] for key in sorted(result)}

    @staticmethod
    def make_match_configs_from_index(index: Mapping[tuple[str, str], str]) -> list[MatchingConfig]:
        return [MatchingConfig(key[0], key[1], index[key]) for key in sorted(index)]

    def __repr__(self) -> str:
        return f"Configuration(name={self.name!r}, branches={self.number_of_branches()})"