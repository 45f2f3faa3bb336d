"""
Order Notification Utilities
============================

Shared helper modules for the Commerce order WhatsApp notifier:

- logger.py          → structured JSON logging
- responses.py       → error response shape for the webhook
- phone.py           → phone number normalization and lookup on orders
- secrets.py         → AWS Secrets Manager integration for Twilio credentials
- twilio_client.py   → Twilio config resolution and WhatsApp sending

All functions in this package are stateless, suitable for one-shot
serverless invocations.
"""

from order_notification.utils.logger import get_logger
from order_notification.utils.responses import error_response

__all__ = [
    "get_logger",
    "error_response",
]
