"""Entry points turning raw request data into validated request models.

Pydantic does the field-by-field work; this module only reduces its
``ValidationError`` to a single ``RequestDecodeError`` so callers see one
failure kind and the path of the offending field.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from errors import EmptyFrameSequence, InvalidRequest, MissingRequiredField, RequestDecodeError
from schemas import RequestBody, RequestParams
from settings import settings

logger = logging.getLogger(__name__)


def _field_path(loc: tuple) -> str | None:
    return ".".join(str(part) for part in loc) or None


def _translate(exc: ValidationError) -> RequestDecodeError:
    """Map the first reported validation error onto the error taxonomy."""
    error = exc.errors()[0]
    field = _field_path(error["loc"])
    cause = error.get("ctx", {}).get("error")
    if isinstance(cause, RequestDecodeError):
        return cause.with_field(field)
    if error["type"] == "missing":
        return MissingRequiredField(f"Missing required field: {field}", field)
    return InvalidRequest(error["msg"], field)


def decode_params(params: Mapping[str, Any]) -> RequestParams:
    """Decode a single-position request from flat key/value parameters.

    Args:
        params: Query-string style mapping; unknown keys are ignored.

    Returns:
        The validated RequestParams.

    Raises:
        RequestDecodeError: Subclass naming the first problem found.
    """
    try:
        request = RequestParams.model_validate(dict(params))
    except ValidationError as e:
        err = _translate(e)
        logger.info(f"Rejected image request: {err.kind} on {err.field}: {err}")
        raise err from e
    logger.debug(f"Decoded image request fen={request.fen} last_move={request.last_move.uci()}")
    return request


def decode_body(data: Any, allow_empty: bool | None = None) -> RequestBody:
    """Decode an animation request from a parsed JSON body.

    Args:
        data: The parsed JSON document, expected to be an object.
        allow_empty: Accept a body without frames. Defaults to
            ``settings.allow_empty_frames``.

    Returns:
        The validated RequestBody, frames in the order they were sent.

    Raises:
        RequestDecodeError: Subclass naming the first problem found. A
            single bad frame rejects the whole body.
    """
    if allow_empty is None:
        allow_empty = settings.allow_empty_frames

    if not isinstance(data, Mapping):
        err = InvalidRequest("Request body must be a JSON object")
        logger.info(f"Rejected game request: {err}")
        raise err

    try:
        body = RequestBody.model_validate(dict(data))
    except ValidationError as e:
        err = _translate(e)
        logger.info(f"Rejected game request: {err.kind} on {err.field}: {err}")
        raise err from e

    if not body.frames and not allow_empty:
        err = EmptyFrameSequence("At least one frame is required", "frames")
        logger.info(f"Rejected game request: {err}")
        raise err

    logger.debug(f"Decoded game request with {len(body.frames)} frames")
    return body
