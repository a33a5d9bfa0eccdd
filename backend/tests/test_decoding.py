"""Tests for the decode entry points and error translation."""

import os
import sys

import chess
import pytest
from unittest.mock import patch

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from decoding import decode_body, decode_params
from errors import (
    EmptyFrameSequence,
    InvalidRequest,
    MalformedMove,
    MalformedPosition,
    MalformedSquare,
    MissingRequiredField,
    NameTooLong,
    RequestDecodeError,
)
from notation import STARTING_POSITION
from orientation import Orientation
from schemas import RequestBody

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
AFTER_E4_FEN = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"


class TestDecodeParams:
    """Tests for the flat-parameter form."""

    def test_empty_params(self):
        params = decode_params({})
        assert params.white is None
        assert params.black is None
        assert params.fen == STARTING_POSITION
        assert params.last_move == chess.Move.null()
        assert params.check is None
        assert params.orientation is Orientation.WHITE

    def test_unknown_keys_ignored(self):
        assert decode_params({"theme": "brown"}).fen == STARTING_POSITION

    def test_bad_fen(self):
        with pytest.raises(MalformedPosition) as exc:
            decode_params({"fen": "bogus"})
        assert exc.value.field == "fen"

    def test_bad_move(self):
        with pytest.raises(MalformedMove) as exc:
            decode_params({"lastMove": "e2e9"})
        assert exc.value.field == "lastMove"

    def test_bad_check(self):
        with pytest.raises(MalformedSquare) as exc:
            decode_params({"check": "i9"})
        assert exc.value.field == "check"

    def test_empty_check_is_malformed(self):
        with pytest.raises(MalformedSquare):
            decode_params({"check": ""})

    def test_long_name(self):
        with pytest.raises(NameTooLong) as exc:
            decode_params({"white": "x" * 101})
        assert exc.value.field == "white"

    def test_bad_orientation(self):
        with pytest.raises(InvalidRequest) as exc:
            decode_params({"orientation": "sideways"})
        assert exc.value.field == "orientation"

    def test_errors_share_base(self):
        with pytest.raises(RequestDecodeError):
            decode_params({"fen": "bogus"})


class TestDecodeBody:
    """Tests for the structured-body form."""

    def test_two_frames(self):
        body = decode_body({
            "frames": [{"fen": START_FEN}, {"fen": AFTER_E4_FEN, "lastMove": "e2e4"}],
            "delay": 50,
        })
        assert len(body.frames) == 2
        assert body.frames[0].fen == STARTING_POSITION
        assert body.frames[1].last_move.from_square == chess.E2
        assert body.frames[1].last_move.to_square == chess.E4
        assert [f.delay for f in body.frames] == [None, None]
        assert [body.frame_delay(f) for f in body.frames] == [50, 50]

    def test_missing_fen_in_frame(self):
        with pytest.raises(MissingRequiredField) as exc:
            decode_body({"frames": [{"fen": START_FEN}, {"lastMove": "e2e4"}]})
        assert exc.value.field == "frames.1.fen"

    def test_missing_frames(self):
        with pytest.raises(MissingRequiredField) as exc:
            decode_body({"white": "Molinari"})
        assert exc.value.field == "frames"

    def test_one_malformed_frame_rejects_all(self):
        with pytest.raises(MalformedPosition) as exc:
            decode_body({"frames": [{"fen": START_FEN}, {"fen": START_FEN}, {"fen": "8/8/8 w"}]})
        assert exc.value.field == "frames.2.fen"

    def test_malformed_check_in_frame(self):
        with pytest.raises(MalformedSquare):
            decode_body({"frames": [{"fen": START_FEN, "check": "z1"}]})

    def test_negative_delay(self):
        with pytest.raises(InvalidRequest) as exc:
            decode_body({"frames": [{"fen": START_FEN}], "delay": -5})
        assert exc.value.field == "delay"

    @pytest.mark.parametrize("delay", ["50", True, 50.0])
    def test_non_integer_body_delay(self, delay):
        with pytest.raises(InvalidRequest) as exc:
            decode_body({"frames": [{"fen": START_FEN}], "delay": delay})
        assert exc.value.field == "delay"

    @pytest.mark.parametrize("delay", ["50", True, 50.0])
    def test_non_integer_frame_delay(self, delay):
        with pytest.raises(InvalidRequest) as exc:
            decode_body({"frames": [{"fen": START_FEN, "delay": delay}]})
        assert exc.value.field == "frames.0.delay"

    def test_not_an_object(self):
        with pytest.raises(InvalidRequest):
            decode_body([{"fen": START_FEN}])

    def test_empty_frames_rejected_by_default(self):
        with pytest.raises(EmptyFrameSequence):
            decode_body({"frames": []})

    def test_empty_frames_allowed_by_caller(self):
        assert decode_body({"frames": []}, allow_empty=True).frames == ()

    def test_empty_frames_allowed_by_settings(self):
        with patch("decoding.settings") as mock_settings:
            mock_settings.allow_empty_frames = True
            assert decode_body({"frames": []}).frames == ()

    def test_example_round_trip(self):
        example = RequestBody.example()
        decoded = decode_body(example.to_wire())
        assert decoded.to_wire() == example.to_wire()
        assert decoded.frames[1].last_move == example.frames[1].last_move

    def test_error_dict(self):
        with pytest.raises(RequestDecodeError) as exc:
            decode_body({"frames": [{"fen": START_FEN, "lastMove": "nope"}]})
        assert exc.value.to_dict() == {
            "error": "MalformedMove",
            "field": "frames.0.lastMove",
            "detail": "Invalid move: 'nope'",
        }
