"""Response Writer — uniform helpers for JSON bodies and plain-text errors.

Invariants:
    - Every response sets its content type explicitly
    - Errors are text/plain with the PluginError's caller-safe message only
    - JSON encoding failures raise SerializationError, never a bare exception
    - A failure while sending a JSON body is reported through on_write_failure, not raised

Design Decisions:
    - jsonable_encoder + json.dumps(ensure_ascii=False): non-ASCII display names
      (and the hint dash) go out as UTF-8, not \\u escapes
"""

import json
import logging
from collections.abc import Callable

from fastapi.encoders import jsonable_encoder
from fastapi.responses import PlainTextResponse, Response
from starlette.types import Receive, Scope, Send

from wrangler.core.errors import PluginError, SerializationError, WriteFailureError

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


class GuardedJSONResponse(Response):
    """JSON response that reports send failures instead of propagating them.

    The status line may already be on the wire when sending fails, so the
    failure can only be logged.
    """

    media_type = JSON_MEDIA_TYPE

    def __init__(self, body: bytes, status_code: int = 200):
        super().__init__(content=body, status_code=status_code)
        self.on_write_failure: Callable[[PluginError], None] | None = None

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        except OSError as e:
            error = WriteFailureError(e)
            if self.on_write_failure is not None:
                self.on_write_failure(error)
            else:
                logger.error(f"failed to write response: {e}")


def encode_json(obj) -> bytes:
    """Encode a model, a list of models, or plain data as UTF-8 JSON."""
    try:
        return json.dumps(jsonable_encoder(obj), ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(e)


def respond_json(obj, status_code: int = 200) -> GuardedJSONResponse:
    return GuardedJSONResponse(encode_json(obj), status_code=status_code)


def respond_error(exc: PluginError) -> PlainTextResponse:
    return PlainTextResponse(exc.to_plain_text(), status_code=exc.http_status)
