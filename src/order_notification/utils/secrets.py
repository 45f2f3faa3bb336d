import json
import logging
import os
from typing import Any, Dict, Optional

import boto3


def get_secret_name(params: Dict[str, Any]) -> Optional[str]:
    """
    TWILIO_SECRET_NAME may come with the request parameters or the
    environment. Returns None when neither sets it.
    """
    return params.get("TWILIO_SECRET_NAME") or os.getenv("TWILIO_SECRET_NAME") or None


def _read_secret(secret_name: str, region_name: str) -> Dict[str, Any]:
    client = boto3.client("secretsmanager", region_name=region_name)
    secret_str = client.get_secret_value(SecretId=secret_name).get("SecretString")

    if not secret_str:
        raise ValueError("no SecretString payload")

    data = json.loads(secret_str)
    if not isinstance(data, dict):
        raise ValueError("SecretString is not a JSON object")
    return data


def get_twilio_secrets(
    secret_name: str,
    logger: logging.Logger,
    region_name: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Fetch Twilio credentials from AWS Secrets Manager, e.g.:

        {
          "account_sid": "...",
          "auth_token": "...",
          "whatsapp_from": "whatsapp:+14155238886"
        }

    An unreadable secret only disables notifications: the failure is logged
    and an empty dict returned, so the order is still processed.
    """
    region_name = region_name or os.getenv("AWS_REGION", "us-east-1")
    logger.debug("Fetching Twilio secret %s in %s", secret_name, region_name)

    try:
        return _read_secret(secret_name, region_name)
    except Exception as e:
        logger.warning(
            "Twilio secret %s unavailable, continuing without it: %s",
            secret_name,
            e,
        )
        return {}
