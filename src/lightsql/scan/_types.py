"""Internal types for the statement scanners."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Method(enum.Enum):
    CREATE_TABLE = "CREATE TABLE"
    CREATE_INDEX = "CREATE INDEX"
    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    DROP = "DROP"
    ALTER = "ALTER"
    TRUNCATE = "TRUNCATE"
    NONE = ""  # empty or unrecognized statement


@dataclass
class TableRefs:
    """Tables referenced by one statement, split by role."""

    primary: str | None = None
    plain: list[str] = field(default_factory=list)
    joined: list[str] = field(default_factory=list)

    def all(self) -> list[str]:
        """Primary, plain and joined tables, distinct and first-seen ordered."""
        ordered = ([self.primary] if self.primary else []) + self.plain + self.joined
        return list(dict.fromkeys(ordered))
