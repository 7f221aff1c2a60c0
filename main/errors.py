from flask import jsonify
from werkzeug.exceptions import HTTPException
import logging
from market.libs.errors import APIError

logger = logging.getLogger(__name__)


def handle_error(e):
    if isinstance(e, APIError):
        if e.status_code >= 500:
            logger.error(f"API Error: {e.message}")
        else:
            logger.info(f"API Error ({e.status_code}): {e.message}")
        return jsonify(e.to_dict()), e.status_code
    elif isinstance(e, HTTPException):
        # flask-smorest's abort() and argument parsing attach message/messages
        data = getattr(e, "data", None) or {}
        messages = data.get("messages")
        message = data.get("message") or (
            "Invalid request parameters" if messages else e.description
        )
        logger.info(f"HTTP Error ({e.code}): {message}")
        body = {"error": message}
        if messages:
            body["errors"] = messages
        return jsonify(body), e.code
    else:
        logger.exception("Unhandled exception")
        return jsonify({"error": "Internal server error"}), 500
