import argparse
import json
import sys

import chess

from decoding import decode_params
from errors import RequestDecodeError
from orientation import Orientation
from schemas import RequestBody, RequestParams


def render_text(request: RequestParams) -> str:
    """Lay the board out the way the image renderer would, as text."""
    board = request.fen.board()
    orientation = request.orientation
    marked = set()
    if request.last_move:
        marked = {request.last_move.from_square, request.last_move.to_square}

    grid = [["   "] * 8 for _ in range(8)]
    for square in chess.SQUARES:
        piece = board.piece_at(square)
        symbol = piece.symbol() if piece else "."
        if square == request.check:
            cell = f"[{symbol}]"
        elif square in marked:
            cell = f"({symbol})"
        else:
            cell = f" {symbol} "
        grid[orientation.y(square)][orientation.x(square)] = cell

    lines = []
    top, bottom = orientation.fold((request.black, request.white), (request.white, request.black))
    if top:
        lines.append(f"   {top}")
    for row, cells in enumerate(grid):
        rank = orientation.fold(7 - row, row)
        lines.append(f"{chess.RANK_NAMES[rank]}  " + "".join(cells))
    files = [chess.FILE_NAMES[orientation.fold(col, 7 - col)] for col in range(8)]
    lines.append("   " + "".join(f" {f} " for f in files))
    if bottom:
        lines.append(f"   {bottom}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Chess board request preview (CLI)")
    p.add_argument("--fen", help="FEN string (default: starting position)")
    p.add_argument("--last-move", help="Move to highlight in UCI (e.g., e2e4)")
    p.add_argument("--check", help="Square in check (e.g., e8)")
    p.add_argument("--orientation", choices=[o.value for o in Orientation], help="Side at the bottom")
    p.add_argument("--white", help="White player name")
    p.add_argument("--black", help="Black player name")
    p.add_argument("--example", action="store_true", help="Print the example animation request as JSON")
    args = p.parse_args(argv)

    if args.example:
        print(json.dumps(RequestBody.example().to_wire(), indent=2))
        return 0

    raw = {
        "fen": args.fen,
        "lastMove": args.last_move,
        "check": args.check,
        "orientation": args.orientation,
        "white": args.white,
        "black": args.black,
    }
    try:
        request = decode_params({k: v for k, v in raw.items() if v is not None})
    except RequestDecodeError as e:
        print(f"Error: {e.kind} ({e.field}): {e}", file=sys.stderr)
        return 2

    print(render_text(request))
    return 0

if __name__ == "__main__":
    sys.exit(main())
