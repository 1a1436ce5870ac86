"""In-memory event data model for heavy-ion physics analysis."""

__version__ = "0.1.0"

__all__ = [
    "branch_config",
    "configuration",
    "constants",
    "container",
    "data_header",
    "detector",
    "event_header",
    "hit",
    "indexed",
    "matching",
    "module",
    "particle",
    "pdg",
    "track",
]