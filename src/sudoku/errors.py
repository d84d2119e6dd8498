"""Error types raised by the 9x9 grid model."""

from __future__ import annotations


class ParseError(ValueError):
    """Raised when puzzle text does not decode to exactly 81 cells."""

    def __init__(self, count: int) -> None:
        super().__init__(f"puzzle must contain exactly 81 cells, got {count}")
        self.count = count


class InsertError(ValueError):
    """Base class for rejected insertions.

    ``x`` is the column and ``y`` the row of the attempted placement.
    """

    code = "INSERT"
    reason = "insertion rejected"

    def __init__(self, x: int, y: int, digit: int) -> None:
        super().__init__(f"{self.reason}: {digit} at ({x}, {y})")
        self.x = x
        self.y = y
        self.digit = digit


class InvalidLocation(InsertError):
    """Coordinates outside ``[0, 9)``."""

    code = "INVALID_LOCATION"
    reason = "location out of range"


class InvalidNumber(InsertError):
    """Digit outside ``[1, 9]``."""

    code = "INVALID_NUMBER"
    reason = "digit out of range"


class RowDuplicate(InsertError):
    code = "ROW_DUPLICATE"
    reason = "duplicate instance already in row"


class ColDuplicate(InsertError):
    code = "COL_DUPLICATE"
    reason = "duplicate instance already in col"


class BlockDuplicate(InsertError):
    code = "BLOCK_DUPLICATE"
    reason = "duplicate instance already in block"


__all__ = [
    "BlockDuplicate",
    "ColDuplicate",
    "InsertError",
    "InvalidLocation",
    "InvalidNumber",
    "ParseError",
    "RowDuplicate",
]
