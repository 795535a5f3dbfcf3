"""Source positions attached to expression nodes.

Parsers that know where a node came from can record it in a SourceLocation.
The renderer does not need it; error reports surface it alongside the
reconstructed expression.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a node in its original expression source.

    Line and column are 1-indexed. ``source`` names where the expression
    came from (a file, a template, a config key).

    Examples:
            >>> str(SourceLocation(lineno=3, col_offset=7))
            '3:7'
            >>> str(SourceLocation(1, 4, source="rules.jexl"))
            'rules.jexl:1:4'

    """

    lineno: int
    col_offset: int
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source: str | None = None

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder for synthetic nodes."""
        return cls(lineno=0, col_offset=0)
