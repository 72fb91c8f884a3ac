import logging
from typing import Any, Mapping, NamedTuple

logger = logging.getLogger(__name__)

ECHO_PREFIX = "Echo: "
MISSING_MESSAGE_ERROR = "Message parameter is required."
INTERNAL_ERROR = "Internal server error."


class EchoResult(NamedTuple):
    status_code: int
    payload: dict


def build_bot_response(message: Any) -> str:
    return f"{ECHO_PREFIX}{message}"


def handle_message(body: Any) -> EchoResult:
    """Turn a parsed request body into a status code and JSON payload.

    A missing or falsy ``message`` short-circuits to 400. Any failure while
    building the reply is logged and reported as a generic 500.
    """
    if not isinstance(body, Mapping):
        body = {}
    message = body.get("message")

    if not message:
        logger.warning('Bad Request: Missing "message" parameter in request body.')
        return EchoResult(400, {"error": MISSING_MESSAGE_ERROR})

    try:
        bot_response = build_bot_response(message)
        logger.info('Received message: "%s" -> Bot response: "%s"', message, bot_response)
        return EchoResult(200, {"botResponse": bot_response})
    except Exception:
        logger.exception("Error processing chat message")
        return EchoResult(500, {"error": INTERNAL_ERROR})
