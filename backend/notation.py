"""Parsers for the three notations found in rendering requests.

Positions are FEN, moves are UCI coordinate moves and squares are plain
algebraic names. Parsing is syntactic only: python-chess checks the
grammar, nothing here checks that a position is reachable or a move is
legal.
"""

from dataclasses import dataclass

import chess

from errors import MalformedMove, MalformedPosition, MalformedSquare


@dataclass(frozen=True)
class Position:
    """The six fields of a FEN record."""

    placement: str
    turn: chess.Color
    castling: str
    en_passant: chess.Square | None
    halfmove_clock: int
    fullmove_number: int

    @classmethod
    def from_board(cls, board: chess.Board) -> "Position":
        return cls(
            placement=board.board_fen(),
            turn=board.turn,
            castling=board.castling_xfen(),
            en_passant=board.ep_square,
            halfmove_clock=board.halfmove_clock,
            fullmove_number=board.fullmove_number,
        )

    @property
    def fen(self) -> str:
        ep = chess.square_name(self.en_passant) if self.en_passant is not None else "-"
        return " ".join([
            self.placement,
            "w" if self.turn == chess.WHITE else "b",
            self.castling,
            ep,
            str(self.halfmove_clock),
            str(self.fullmove_number),
        ])

    def board(self) -> chess.Board:
        """Build a fresh, independently mutable board for this position."""
        return chess.Board(self.fen)

    def __str__(self) -> str:
        return self.fen


STARTING_POSITION = Position.from_board(chess.Board())


def parse_position(text: str) -> Position:
    """Parse a FEN string.

    Trailing fields may be left out, as FEN readers commonly allow; they
    default to ``w - - 0 1``. Castling rights without a matching king and
    rook are dropped, as python-chess does.

    Raises:
        MalformedPosition: If the text is not syntactically valid FEN.
    """
    if not isinstance(text, str) or not text.strip():
        raise MalformedPosition(f"Invalid FEN: {text!r}")
    try:
        board = chess.Board(text)
    except ValueError as e:
        raise MalformedPosition(f"Invalid FEN: {e}") from e
    parts = text.split()
    if len(parts) == 6 and int(parts[5]) < 1:
        raise MalformedPosition(f"Invalid FEN: full-move number must be at least 1, got {parts[5]}")
    return Position.from_board(board)


def parse_move(text: str) -> chess.Move:
    """Parse a UCI move. ``"0000"`` is the null move.

    Raises:
        MalformedMove: On bad square names or an unknown promotion letter.
    """
    if not isinstance(text, str):
        raise MalformedMove(f"Invalid move: {text!r}")
    try:
        return chess.Move.from_uci(text)
    except ValueError as e:
        raise MalformedMove(f"Invalid move: {text!r}") from e


def parse_square(text: str | None) -> chess.Square | None:
    """Parse an optional square name such as ``"e4"``.

    ``None`` means no square was given and is returned unchanged.

    Raises:
        MalformedSquare: If a name is given but is not one of a1..h8.
    """
    if text is None:
        return None
    if not isinstance(text, str):
        raise MalformedSquare(f"Invalid square name: {text!r}")
    try:
        return chess.parse_square(text)
    except ValueError as e:
        raise MalformedSquare(f"Invalid square name: {text!r}") from e
