# utils/twilio_client.py

import logging
import os
from typing import Any, Dict, Optional

from twilio.rest import Client as TwilioClient

from order_notification.utils.phone import format_phone_for_whatsapp
from order_notification.utils.secrets import get_secret_name, get_twilio_secrets

CONFIG_MISSING_ERROR = "Twilio configuration missing - WhatsApp notifications will not be sent"

# config key -> (request parameter / environment variable, secret field)
_CONFIG_SOURCES = {
    "account_sid": ("TWILIO_ACCOUNT_SID", "account_sid"),
    "auth_token": ("TWILIO_AUTH_TOKEN", "auth_token"),
    "from_number": ("TWILIO_WHATSAPP_FROM", "whatsapp_from"),
}


def load_twilio_config(params: Dict[str, Any], logger: logging.Logger) -> Dict[str, Optional[str]]:
    """
    Resolve the Twilio config for this invocation.

    Each field is taken from the request parameters first, then from the
    Secrets Manager secret named by TWILIO_SECRET_NAME (only fetched when
    something is still missing), then from the environment. Missing fields
    stay None; send_whatsapp_message treats that as "notifications disabled".
    """
    conf: Dict[str, Optional[str]] = {
        key: params.get(param) or None for key, (param, _) in _CONFIG_SOURCES.items()
    }

    secret_name = get_secret_name(params)
    if secret_name and not all(conf.values()):
        secrets = get_twilio_secrets(secret_name, logger)
        for key, (_, field) in _CONFIG_SOURCES.items():
            conf[key] = conf[key] or secrets.get(field) or None

    for key, (env_var, _) in _CONFIG_SOURCES.items():
        conf[key] = conf[key] or os.getenv(env_var) or None

    return conf


def build_client(config: Dict[str, Optional[str]]) -> TwilioClient:
    """
    Build a fresh Twilio client. One per invocation; nothing is cached.
    """
    return TwilioClient(config["account_sid"], config["auth_token"])


def send_whatsapp_message(
    config: Dict[str, Optional[str]],
    to_phone_number: str,
    body: str,
    logger: logging.Logger,
) -> Dict[str, Any]:
    """
    Send `body` to `to_phone_number` over WhatsApp.

    Never raises. Returns {"success": True, "message_sid", "status"} on
    success, otherwise {"success": False, "error": "..."}. Missing credentials
    are an expected state (notifications disabled) and only logged as a warning.
    """
    if not (config.get("account_sid") and config.get("auth_token") and config.get("from_number")):
        logger.warning(CONFIG_MISSING_ERROR)
        return {"success": False, "error": CONFIG_MISSING_ERROR}

    try:
        client = build_client(config)

        whatsapp_to = format_phone_for_whatsapp(to_phone_number)
        if not whatsapp_to:
            raise ValueError("Invalid phone number format")

        logger.info("Sending WhatsApp to %s", whatsapp_to)
        resp = client.messages.create(
            from_=config["from_number"],
            to=whatsapp_to,
            body=body,
        )

        sid = getattr(resp, "sid", None)
        logger.info(
            "WhatsApp message sent successfully. SID: %s",
            sid,
            extra={"status": getattr(resp, "status", None)},
        )
        return {
            "success": True,
            "message_sid": sid,
            "status": getattr(resp, "status", None),
        }
    except Exception as e:
        error_message = str(e) or "Unknown Twilio error"
        logger.error(
            "Failed to send WhatsApp message: %s",
            error_message,
            exc_info=True,
        )
        return {"success": False, "error": error_message}
