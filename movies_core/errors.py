import logging
import math

from flask import request
from werkzeug.exceptions import HTTPException, BadRequest
from typing import Any, Dict

logger = logging.getLogger(__name__)

# -----------------------------
# JSON error handlers
# -----------------------------

def install_json_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http(e: HTTPException):
        return {
            "error": {
                "status": e.code,
                "code": e.name.replace(" ", "_").upper(),
                "message": e.description
            }
        }, e.code

    @app.errorhandler(Exception)
    def handle_generic(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        # Avoid leaking details in responses
        return {
            "error": {
                "status": 500,
                "code": "INTERNAL_SERVER_ERROR",
                "message": "Internal server error"
            }
        }, 500


# -----------------------------
# Validators & helpers
# -----------------------------

MIN_AGE, MAX_AGE = -128, 127  # director age is a signed byte

def read_json() -> Dict[str, Any]:
    # any content type is accepted; only the body has to decode
    data = request.get_json(silent=True, force=True)
    if data is None:
        raise BadRequest("Invalid or missing JSON body")
    if not isinstance(data, dict):
        raise BadRequest("JSON body must be an object")
    return data

def validate_text(v: Any, field: str) -> str:
    if v is None:
        return ""
    if not isinstance(v, str):
        raise BadRequest(f"{field} must be a string")
    return v

def parse_rating(v: Any) -> float:
    if v is None:
        return 0.0
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise BadRequest("rating must be a number")
    try:
        r = float(v)
    except OverflowError:
        raise BadRequest("rating must be a finite number")
    if not math.isfinite(r):  # NaN and Infinity are not valid JSON on the way out
        raise BadRequest("rating must be a finite number")
    return r

def parse_age(v: Any) -> int:
    if v is None:
        return 0
    if isinstance(v, bool) or not isinstance(v, int):
        raise BadRequest("director.age must be an integer")
    if not (MIN_AGE <= v <= MAX_AGE):
        raise BadRequest(f"director.age must be between {MIN_AGE} and {MAX_AGE}")
    return v

def validate_director(v: Any) -> Dict[str, Any] | None:
    if v is None:
        return None
    if not isinstance(v, dict):
        raise BadRequest("director must be an object or null")
    return v
