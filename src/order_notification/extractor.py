"""
Pull the order (and, for shipment events, the shipment) out of a Commerce
event payload.

Commerce is not consistent about where the order lives: it may be
`data.value.order`, `data.value` itself, or `data.value.shipment.order` for
shipments. Each location is a small lookup step; the steps are tried in order
and the first non-empty dict wins.
"""

import logging
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from order_notification.utils.responses import error_response

SHIPMENT_EVENT_MARKER = "sales_order_shipment_save_after"

Payload = Dict[str, Any]
LookupStep = Callable[[], Optional[Payload]]


def _as_dict(value: Any) -> Optional[Payload]:
    return value if isinstance(value, dict) and value else None


def _event_value(params: Payload) -> Optional[Payload]:
    return _as_dict((_as_dict(params.get("data")) or {}).get("value"))


def _order_in_value(params: Payload) -> Optional[Payload]:
    return _as_dict((_event_value(params) or {}).get("order"))


def _order_in_shipment(shipment_data: Optional[Payload]) -> Optional[Payload]:
    return _as_dict((shipment_data or {}).get("order"))


def _first_found(steps: Iterable[LookupStep]) -> Optional[Payload]:
    for step in steps:
        found = step()
        if found:
            return found
    return None


def is_shipment_event(event_type: str) -> bool:
    return SHIPMENT_EVENT_MARKER in (event_type or "")


def extract_shipment_data(params: Payload) -> Optional[Payload]:
    return _as_dict((_event_value(params) or {}).get("shipment"))


def extract_order_data(
    params: Payload,
    shipment_data: Optional[Payload] = None,
    shipment_event: bool = False,
) -> Optional[Payload]:
    steps = [
        lambda: _order_in_value(params),
        lambda: _event_value(params),
    ]
    if shipment_event and shipment_data:
        steps.insert(0, lambda: _order_in_shipment(shipment_data))
    return _first_found(steps)


def extract_order_info(order_data: Payload) -> Dict[str, Any]:
    first_name = order_data.get("customer_firstname") or ""
    last_name = order_data.get("customer_lastname") or ""
    return {
        "order_number": order_data.get("increment_id") or order_data.get("entity_id"),
        "customer_email": order_data.get("customer_email"),
        "customer_name": f"{first_name} {last_name}".strip(),
        "order_total": order_data.get("grand_total"),
        "order_currency": order_data.get("order_currency_code"),
        "order_status": order_data.get("status") or order_data.get("state"),
    }


def extract_tracking_number(shipment_data: Optional[Payload]) -> Optional[str]:
    tracks = (shipment_data or {}).get("tracks") or []
    if not tracks or not isinstance(tracks[0], dict):
        return None
    track = tracks[0]
    return track.get("track_number") or track.get("number") or None


def extract_event_data(
    params: Payload,
    event_type: str,
    logger: logging.Logger,
) -> Tuple[Optional[Payload], Optional[Payload], Optional[Dict[str, Any]]]:
    """
    Returns (order_data, shipment_data, error). On failure only `error` is
    set, and it is a ready-to-return 400 response.
    """
    shipment_event = is_shipment_event(event_type)
    shipment_data = extract_shipment_data(params) if shipment_event else None

    order_data = extract_order_data(params, shipment_data, shipment_event)

    if not order_data:
        if shipment_event and not shipment_data:
            logger.error("No shipment or order data found in shipment event")
            return None, None, error_response(400, "Missing shipment data", logger)
        logger.error("No order data found in event")
        return None, None, error_response(400, "Missing order data", logger)

    return order_data, shipment_data, None
