"""Exceptions raised by the domain core."""

from __future__ import annotations


class InvariantViolation(RuntimeError):
    """The board registry is corrupted.

    Never raised for caller mistakes; rule violations are reported through
    :class:`~checkie.core.move.MoveResult` instead.
    """
