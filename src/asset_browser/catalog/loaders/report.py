"""
Load accounting for the source databases.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class SourceReport:
    """Counts for one source file."""

    name: str
    loaded: int = 0
    skipped: int = 0
    available: bool = False
    errors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "available": self.available,
            "loaded": self.loaded,
            "skipped": self.skipped,
            "errors": list(self.errors),
        }


@dataclass
class LoadReport:
    """What one load pass read, per source file."""

    sources: Dict[str, SourceReport] = field(default_factory=dict)

    def source(self, name: str) -> SourceReport:
        if name not in self.sources:
            self.sources[name] = SourceReport(name=name)
        return self.sources[name]

    @property
    def total_loaded(self) -> int:
        return sum(s.loaded for s in self.sources.values())

    @property
    def total_skipped(self) -> int:
        return sum(s.skipped for s in self.sources.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_loaded": self.total_loaded,
            "total_skipped": self.total_skipped,
            "sources": {name: s.to_dict() for name, s in self.sources.items()},
        }
