import logging
from typing import Any, Dict


def error_response(status_code: int, message: str, logger: logging.Logger) -> Dict[str, Any]:
    """
    Build the failure shape returned to Adobe I/O Runtime:

        {"error": {"statusCode": 400, "body": {"error": "..."}}}

    Success responses are not wrapped; they carry statusCode at the top level.
    """
    logger.info("%s: %s", status_code, message)
    return {
        "error": {
            "statusCode": status_code,
            "body": {"error": message},
        }
    }
