import azure.functions as func
import json
import logging

from app_settings import ALLOWED_ORIGIN, LOG_LEVEL
from .echo import handle_message

logging.getLogger(__name__).setLevel(LOG_LEVEL)


def _with_cors(response: func.HttpResponse) -> func.HttpResponse:
    response.headers["Access-Control-Allow-Origin"] = ALLOWED_ORIGIN
    response.headers["Access-Control-Allow-Methods"] = "POST, OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


def main(req: func.HttpRequest) -> func.HttpResponse:
    # browser preflight for the chat widget
    if req.method == "OPTIONS":
        return _with_cors(func.HttpResponse(""))

    try:
        body = req.get_json()
    # deeply nested bodies blow the decoder stack
    except (ValueError, RecursionError):
        body = {}

    result = handle_message(body)
    response = func.HttpResponse(
        json.dumps(result.payload),
        status_code=result.status_code,
        mimetype="application/json"
    )
    return _with_cors(response)
