"""Terminal presentation of boards and solver progress."""

from __future__ import annotations

from .terminal import TerminalDisplay, bold_givens

__all__ = ["TerminalDisplay", "bold_givens"]
