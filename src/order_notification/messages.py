from types import MappingProxyType
from typing import Any, Callable, Dict, Optional

from order_notification.extractor import extract_tracking_number

ORDER_PLACED = "com.adobe.commerce.observer.sales_order_place_after"
ORDER_SAVED = "com.adobe.commerce.observer.sales_order_save_after"
SHIPMENT_SAVED = "com.adobe.commerce.observer.sales_order_shipment_save_after"
ORDER_CANCELLED = "com.adobe.commerce.observer.sales_order_cancel_after"


def _format_amount(amount: Any) -> str:
    """Render the total as Commerce sent it; 100.0 reads as 100."""
    if amount is None:
        return ""
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


def generate_order_placed_message(
    customer_name: str,
    order_number: Any,
    order_total: Any,
    order_currency: Optional[str],
) -> str:
    return (
        f"Hi {customer_name}, your order #{order_number} for "
        f"{_format_amount(order_total)} {order_currency or ''} "
        "has been confirmed. Thank you for your purchase!"
    )


def generate_order_status_change_message(customer_name: str, order_number: Any, order_status: str) -> str:
    return f"Hi {customer_name}, your order #{order_number} status has been updated to {order_status}."


def generate_shipment_message(
    customer_name: str,
    order_number: Any,
    tracking_number: Optional[str] = None,
) -> str:
    if tracking_number:
        return (
            f"Hi {customer_name}, your order #{order_number} has been shipped! "
            f"Track your package using tracking number {tracking_number}."
        )
    return f"Hi {customer_name}, your order #{order_number} has been shipped!"


def generate_cancellation_message(customer_name: str, order_number: Any) -> str:
    return (
        f"Hi {customer_name}, your order #{order_number} has been cancelled. "
        "If you have any questions, please contact us."
    )


def _placed(order_data, customer_name, order_number, shipment_data):
    return generate_order_placed_message(
        customer_name,
        order_number,
        order_data.get("grand_total"),
        order_data.get("order_currency_code"),
    )


def _saved(order_data, customer_name, order_number, shipment_data):
    status = order_data.get("status") or order_data.get("state")
    if not status:
        # Nothing to report on; fall back to the confirmation text.
        return _placed(order_data, customer_name, order_number, shipment_data)
    return generate_order_status_change_message(customer_name, order_number, status)


def _shipped(order_data, customer_name, order_number, shipment_data):
    return generate_shipment_message(customer_name, order_number, extract_tracking_number(shipment_data))


def _cancelled(order_data, customer_name, order_number, shipment_data):
    return generate_cancellation_message(customer_name, order_number)


# Exact event type -> message builder. Independent of the validator's
# allow-list so that template changes never widen authorization.
EVENT_TEMPLATES: "MappingProxyType[str, Callable[..., str]]" = MappingProxyType({
    ORDER_CANCELLED: _cancelled,
    ORDER_PLACED: _placed,
    SHIPMENT_SAVED: _shipped,
    ORDER_SAVED: _saved,
})


def generate_message_by_event_type(
    event_type: str,
    order_data: Dict[str, Any],
    customer_name: str,
    order_number: Any,
    shipment_data: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Build the WhatsApp text for an event. Unknown event types get the
    order confirmation text rather than an error.
    """
    builder = EVENT_TEMPLATES.get(event_type, _placed)
    return builder(order_data, customer_name, order_number, shipment_data)
