"""
Phone number helpers.

Commerce stores telephone numbers as free text. Twilio wants E.164
(`+14155552671`), and the WhatsApp channel wants it prefixed with `whatsapp:`.
"""

import re
from typing import Any, Callable, Dict, Optional, Sequence

WHATSAPP_PREFIX = "whatsapp:"

_NON_PHONE_CHARS = re.compile(r"[^\d+]")


def format_phone_number(phone_number: Optional[str]) -> Optional[str]:
    """
    Normalize a phone number to E.164.

    No length or country-code validation is done: a 10-digit number is
    assumed to be US/Canada, anything else just gets a leading "+".
    """
    if not phone_number:
        return None

    cleaned = _NON_PHONE_CHARS.sub("", str(phone_number))

    if cleaned.startswith("+"):
        return cleaned

    # International "00" dialing prefix
    if cleaned.startswith("00"):
        return "+" + cleaned[2:]

    if len(cleaned) == 10:
        return "+1" + cleaned

    return "+" + cleaned


def format_phone_for_whatsapp(phone_number: Optional[str]) -> Optional[str]:
    formatted = format_phone_number(phone_number)
    if not formatted:
        return None
    return formatted if formatted.startswith(WHATSAPP_PREFIX) else WHATSAPP_PREFIX + formatted


# ---------------------------------------------------------------------------
# Telephone lookup, one function per source, tried in priority order
# ---------------------------------------------------------------------------

def _phone_from_addresses(order_data: Dict[str, Any]) -> Optional[str]:
    addresses: Sequence[Any] = order_data.get("addresses") or []
    for address in addresses:
        if isinstance(address, dict) and address.get("telephone"):
            return address["telephone"]
    return None


def _phone_from_address_field(field: str) -> Callable[[Dict[str, Any]], Optional[str]]:
    def lookup(order_data: Dict[str, Any]) -> Optional[str]:
        address = order_data.get(field)
        if isinstance(address, dict):
            return address.get("telephone") or None
        return None

    lookup.__name__ = f"_phone_from_{field}"
    return lookup


PHONE_SOURCES = (
    _phone_from_addresses,
    _phone_from_address_field("billing_address"),
    _phone_from_address_field("shipping_address"),
)


def extract_phone_number_from_order(order_data: Optional[Dict[str, Any]]) -> Optional[str]:
    """
    Find the customer's telephone: first address in `addresses` that has
    one, then `billing_address`, then `shipping_address`.
    """
    if not order_data:
        return None

    for source in PHONE_SOURCES:
        phone = source(order_data)
        if phone:
            return phone
    return None
