from order_notification.messages import (
    ORDER_CANCELLED,
    ORDER_PLACED,
    ORDER_SAVED,
    SHIPMENT_SAVED,
    generate_message_by_event_type,
)

ORDER = {"grand_total": 100, "order_currency_code": "USD"}


def test_order_placed():
    msg = generate_message_by_event_type(ORDER_PLACED, ORDER, "Test Customer", "000000008")
    assert msg == (
        "Hi Test Customer, your order #000000008 for 100 USD has been confirmed. "
        "Thank you for your purchase!"
    )


def test_integral_float_total_renders_without_decimals():
    msg = generate_message_by_event_type(ORDER_PLACED, {"grand_total": 100.0, "order_currency_code": "USD"}, "A", "1")
    assert "for 100 USD" in msg
    msg = generate_message_by_event_type(ORDER_PLACED, {"grand_total": 19.99, "order_currency_code": "USD"}, "A", "1")
    assert "for 19.99 USD" in msg


def test_status_change():
    msg = generate_message_by_event_type(ORDER_SAVED, {**ORDER, "status": "processing"}, "Jane Doe", "9")
    assert msg == "Hi Jane Doe, your order #9 status has been updated to processing."


def test_save_without_status_falls_back_to_placed():
    msg = generate_message_by_event_type(ORDER_SAVED, ORDER, "Jane", "9")
    assert "has been confirmed" in msg


def test_shipment_with_and_without_tracking():
    msg = generate_message_by_event_type(SHIPMENT_SAVED, {}, "John", "10", {"tracks": [{"track_number": "TRACK123456"}]})
    assert msg.endswith("Track your package using tracking number TRACK123456.")

    msg = generate_message_by_event_type(SHIPMENT_SAVED, {}, "John", "10", {"tracks": []})
    assert msg == "Hi John, your order #10 has been shipped!"
    assert "tracking" not in msg


def test_cancellation():
    msg = generate_message_by_event_type(ORDER_CANCELLED, {}, "Bob", "11")
    assert "cancelled" in msg


def test_dispatch_is_exact_match():
    # A shipment type must not be mistaken for a plain save.
    assert "shipped" in generate_message_by_event_type(SHIPMENT_SAVED, {"status": "complete"}, "J", "1", None)
    assert "confirmed" in generate_message_by_event_type(ORDER_SAVED + "_extra", {**ORDER, "status": "x"}, "J", "1")
