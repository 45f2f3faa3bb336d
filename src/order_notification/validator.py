import logging
from typing import Any, Dict, Optional

from order_notification.utils.responses import error_response

COMMERCE_NAMESPACE = "com.adobe.commerce"

# Authorization only. Message selection lives in messages.py.
ALLOWED_EVENT_TYPES = (
    "com.adobe.commerce.observer.sales_order_place_after",
    "com.adobe.commerce.observer.sales_order_save_after",
    "com.adobe.commerce.observer.sales_order_shipment_save_after",
    "com.adobe.commerce.observer.sales_order_cancel_after",
)


def validate_cloud_event_structure(
    params: Dict[str, Any],
    logger: logging.Logger,
) -> Optional[Dict[str, Any]]:
    if not params.get("type") or not params.get("source"):
        logger.error("Invalid event structure - missing required CloudEvents fields (type, source)")
        return error_response(400, "Invalid event structure", logger)
    return None


def validate_commerce_event(params: Dict[str, Any], logger: logging.Logger) -> Optional[Dict[str, Any]]:
    """
    The event type must be in the Commerce namespace. An unexpected `source`
    is only worth a warning.
    """
    event_type = params.get("type")
    if not event_type or COMMERCE_NAMESPACE not in event_type:
        logger.error("Invalid event source - not a Commerce event. Event type: %s", event_type)
        return error_response(400, "Invalid event source - not a Commerce event", logger)

    source = params.get("source")
    if source and COMMERCE_NAMESPACE not in source:
        logger.warning("Unexpected event source: %s. Proceeding with caution.", source)

    return None


def validate_event_type(event_type: Optional[str], logger: logging.Logger) -> Optional[Dict[str, Any]]:
    if event_type not in ALLOWED_EVENT_TYPES:
        logger.error(
            "Unauthorized event type: %s. Allowed types: %s",
            event_type,
            ", ".join(ALLOWED_EVENT_TYPES),
        )
        return error_response(400, f"Unauthorized event type: {event_type}", logger)
    return None


def validate_event(params: Dict[str, Any], logger: logging.Logger) -> Optional[Dict[str, Any]]:
    """
    Run every check in order and return the first error response, or None
    when the event may be processed.
    """
    return (
        validate_cloud_event_structure(params, logger)
        or validate_commerce_event(params, logger)
        or validate_event_type(params.get("type"), logger)
    )
