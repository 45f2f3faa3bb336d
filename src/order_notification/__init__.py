"""
Commerce Order WhatsApp Notifier
================================

Webhook action that turns Adobe Commerce order lifecycle events (Adobe I/O
Events CloudEvents) into WhatsApp messages to the customer, sent through
Twilio.

Modules under this package:
- handler.py     → entry points (`main` for I/O Runtime, `lambda_handler` for HTTP)
- validator.py   → envelope and event-type checks
- extractor.py   → order / shipment lookup in the event payload
- messages.py    → message text per event type
- utils/         → logging, phone numbers, Twilio client, secrets, responses

Parameters / environment variables:
  • TWILIO_ACCOUNT_SID     - Twilio account SID
  • TWILIO_AUTH_TOKEN      - Twilio auth token
  • TWILIO_WHATSAPP_FROM   - Sender, e.g. "whatsapp:+14155238886"
  • TWILIO_SECRET_NAME     - Secrets Manager secret with the above (optional)
  • AWS_REGION             - Region for Secrets Manager (default: us-east-1)
  • LOG_LEVEL              - Log verbosity (default: INFO)

Without Twilio credentials events are still processed, but no message is sent.
"""

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = ["__version__"]
