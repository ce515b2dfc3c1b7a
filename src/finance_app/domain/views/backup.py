"""View models for backup import results."""

from dataclasses import dataclass, field


@dataclass
class ImportSummary:
    """Summary of a JSON backup import."""

    imported_count: int = 0
    error_count: int = 0
    sections: dict[str, int] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
