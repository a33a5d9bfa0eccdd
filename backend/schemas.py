from typing import Annotated

import chess
from pydantic import (
    AfterValidator,
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
)

from errors import NameTooLong
from notation import STARTING_POSITION, Position, parse_move, parse_position, parse_square
from orientation import Orientation

MAX_NAME_BYTES = 100


def _check_name(value: str) -> str:
    size = len(value.encode("utf-8"))
    if size > MAX_NAME_BYTES:
        raise NameTooLong(f"Player name is {size} bytes, limit is {MAX_NAME_BYTES}")
    return value


def _to_position(value) -> Position:
    if isinstance(value, Position):
        return value
    return parse_position(value)


def _to_move(value) -> chess.Move:
    if isinstance(value, chess.Move):
        return value
    return parse_move(value)


def _square_name(square: chess.Square | None) -> str | None:
    return chess.square_name(square) if square is not None else None


PlayerName = Annotated[str, AfterValidator(_check_name)]
Fen = Annotated[Position, PlainValidator(_to_position), PlainSerializer(str, return_type=str)]
Uci = Annotated[chess.Move, PlainValidator(_to_move), PlainSerializer(chess.Move.uci, return_type=str)]
CheckSquare = Annotated[
    chess.Square | None,
    PlainValidator(parse_square),
    PlainSerializer(_square_name, return_type=str | None),
]
Delay = Annotated[int, Field(ge=0, le=65535, strict=True)]


class RequestFrame(BaseModel):
    """One board state of an animation."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    fen: Fen = Field(..., description="FEN of the displayed position")
    delay: Delay | None = Field(None, description="Display time, overrides the body default")
    last_move: Uci = Field(
        default_factory=chess.Move.null,
        validation_alias=AliasChoices("last_move", "lastMove"),
        serialization_alias="lastMove",
        description="Move to highlight in UCI, 0000 for none",
    )
    check: CheckSquare = Field(None, description="Square of the king in check")


class RequestParams(BaseModel):
    """A single-position rendering request, as sent in a query string."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    white: PlayerName | None = None
    black: PlayerName | None = None
    fen: Fen = STARTING_POSITION
    last_move: Uci = Field(
        default_factory=chess.Move.null,
        validation_alias="lastMove",
        serialization_alias="lastMove",
    )
    check: CheckSquare = None
    orientation: Orientation = Field(default_factory=Orientation.default)

    def frame(self) -> RequestFrame:
        """View this request as a single animation frame."""
        return RequestFrame(fen=self.fen, last_move=self.last_move, check=_square_name(self.check))


class RequestBody(BaseModel):
    """An animation rendering request, as sent in a JSON body."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    white: PlayerName | None = None
    black: PlayerName | None = None
    frames: tuple[RequestFrame, ...]
    orientation: Orientation = Field(default_factory=Orientation.default)
    delay: Delay = 0

    def frame_delay(self, frame: RequestFrame) -> int:
        """Display time of ``frame``, falling back to the body default."""
        return frame.delay if frame.delay is not None else self.delay

    def to_wire(self) -> dict:
        """Encode back into the JSON shape accepted by ``decode_body``."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def example(cls) -> "RequestBody":
        return cls(
            white="Molinari",
            black="Bordais",
            orientation=Orientation.WHITE,
            delay=50,
            frames=[
                RequestFrame(fen=STARTING_POSITION, last_move=chess.Move.null()),
                RequestFrame(
                    fen="rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1",
                    last_move="e2e4",
                ),
            ],
        )
