import json
from typing import Any, Dict

from order_notification.extractor import extract_event_data, extract_order_info
from order_notification.messages import generate_message_by_event_type
from order_notification.utils.logger import get_logger
from order_notification.utils.phone import extract_phone_number_from_order
from order_notification.utils.responses import error_response
from order_notification.utils.twilio_client import load_twilio_config, send_whatsapp_message
from order_notification.validator import validate_event

_REDACTED_PARAMS = ("TWILIO_AUTH_TOKEN",)


def _params_for_log(params: Dict[str, Any]) -> str:
    safe = {k: ("<hidden>" if k in _REDACTED_PARAMS else v) for k, v in params.items()}
    return json.dumps(safe, default=str)


def main(params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Entry point invoked by Adobe I/O Events with the CloudEvent fields merged
    into the action parameters.
    """
    logger = get_logger("order-notification", params.get("LOG_LEVEL"))

    try:
        logger.info("Processing order notification event")
        logger.debug(_params_for_log(params))

        # Webhook verification handshake from Adobe I/O Events
        if params.get("challenge"):
            logger.info("Received webhook verification challenge")
            return {
                "statusCode": 200,
                "body": {"challenge": params["challenge"]},
            }

        validation_error = validate_event(params, logger)
        if validation_error:
            return validation_error

        event_type = params["type"]
        logger.info("Processing event type: %s", event_type, extra={"event_id": params.get("event_id")})

        order_data, shipment_data, extraction_error = extract_event_data(params, event_type, logger)
        if extraction_error:
            return extraction_error

        order_info = extract_order_info(order_data)
        order_number = order_info["order_number"]
        logger.info("Processing order %s for customer %s", order_number, order_info["customer_email"])

        customer_phone = extract_phone_number_from_order(order_data)
        if not customer_phone:
            logger.warning("No phone number found for order %s", order_number)
            return error_response(400, "Customer phone number not found", logger)

        message = generate_message_by_event_type(
            event_type,
            order_data,
            order_info["customer_name"],
            order_number,
            shipment_data,
        )

        twilio_conf = load_twilio_config(params, logger)
        result = send_whatsapp_message(twilio_conf, customer_phone, message, logger)

        body: Dict[str, Any] = {
            "success": True,
            "message": "Order notification processed",
            "orderNumber": order_number,
            "customerPhone": customer_phone,
            "whatsappSent": result["success"],
        }
        if result.get("error"):
            body["whatsappError"] = result["error"]

        logger.info("Request completed successfully. WhatsApp sent: %s", result["success"])
        return {"statusCode": 200, "body": body}

    except Exception:
        logger.exception("Unexpected error processing order notification")
        return error_response(500, "Internal server error", logger)


def _parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge a JSON `body` (API Gateway / HTTP API style) into the event.
    Events without a body string are already the parameters.
    """
    body = event.get("body")

    if isinstance(body, dict):
        payload = body
    elif isinstance(body, str):
        payload = json.loads(body)
        if not isinstance(payload, dict):
            raise ValueError("JSON body must be an object")
    else:
        return event

    params = {k: v for k, v in event.items() if k != "body"}
    params.update(payload)
    return params


def lambda_handler(event, context):
    logger = get_logger("order-notification")
    logger.info(
        "Webhook invoked",
        extra={"request_id": getattr(context, "aws_request_id", None)},
    )

    try:
        params = _parse_body(event or {})
    except ValueError:
        # json.JSONDecodeError is a ValueError
        logger.warning("Invalid JSON payload", extra={"body_preview": str(event.get("body"))[:200]})
        return error_response(400, "Invalid JSON payload", logger)

    return main(params)
