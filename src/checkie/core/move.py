"""Move and move-result value objects."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import MoveError
from checkie.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable description of one ply.

    ``path`` holds the landing square of every hop, so a simple move has a
    single entry and a multi-jump has one entry per captured piece.
    """

    origin: Square
    path: tuple[Square, ...]
    captured: tuple[Square, ...] = ()
    promotes: bool = False

    @property
    def destination(self) -> Square:
        return self.path[-1]

    @property
    def is_capture(self) -> bool:
        return bool(self.captured)

    @property
    def capture_count(self) -> int:
        return len(self.captured)

    def first_hop(self) -> Move:
        """The single-hop move that starts this sequence.

        Promotion of the hop is resolved when it is applied.
        """
        if len(self.path) == 1:
            return self
        return Move(self.origin, self.path[:1], self.captured[:1])

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.captured else "-"
        return sep.join(square_name(sq) for sq in (self.origin, *self.path))


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of a move request.

    Rejections carry ``error`` and a human-readable ``message``; nothing on
    the board changed in that case.
    """

    success: bool
    captured: tuple[Square, ...] = ()
    became_king: bool = False
    must_continue: bool = False
    error: MoveError | None = None
    message: str | None = None

    @classmethod
    def rejected(cls, error: MoveError, message: str) -> MoveResult:
        return cls(success=False, error=error, message=message)
