from enum import Enum
from typing import TypeVar

import chess

T = TypeVar("T")


class Orientation(str, Enum):
    """Which side of the board is drawn at the bottom of the image."""

    WHITE = "white"
    BLACK = "black"

    @classmethod
    def default(cls) -> "Orientation":
        return cls.WHITE

    def fold(self, white: T, black: T) -> T:
        """Pick ``white`` or ``black`` depending on this orientation."""
        return white if self is Orientation.WHITE else black

    @property
    def color(self) -> chess.Color:
        return self.fold(chess.WHITE, chess.BLACK)

    def x(self, square: chess.Square) -> int:
        """Column of ``square`` in screen space, 0 being the left edge."""
        file_idx = chess.square_file(square)
        return self.fold(file_idx, 7 - file_idx)

    def y(self, square: chess.Square) -> int:
        """Row of ``square`` in screen space, 0 being the top edge."""
        rank_idx = chess.square_rank(square)
        return self.fold(7 - rank_idx, rank_idx)
