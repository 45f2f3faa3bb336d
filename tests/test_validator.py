from order_notification.validator import (
    ALLOWED_EVENT_TYPES,
    validate_commerce_event,
    validate_event,
    validate_event_type,
)

PLACE_AFTER = "com.adobe.commerce.observer.sales_order_place_after"


def test_valid_event_passes(stub_logger):
    assert validate_event({"type": PLACE_AFTER, "source": "com.adobe.commerce"}, stub_logger) is None


def test_missing_source_is_invalid_structure(stub_logger):
    err = validate_event({"type": PLACE_AFTER}, stub_logger)
    assert err["error"]["statusCode"] == 400
    assert err["error"]["body"]["error"] == "Invalid event structure"


def test_structure_is_checked_before_namespace(stub_logger):
    err = validate_event({"type": "com.example.event"}, stub_logger)
    assert err["error"]["body"]["error"] == "Invalid event structure"


def test_non_commerce_type_rejected(stub_logger):
    err = validate_commerce_event({"type": "com.example.event", "source": "x"}, stub_logger)
    assert err["error"]["body"]["error"] == "Invalid event source - not a Commerce event"


def test_foreign_source_only_warns(stub_logger):
    assert validate_event({"type": PLACE_AFTER, "source": "urn:other"}, stub_logger) is None
    assert any("Unexpected event source" in m for m in stub_logger.messages("warning"))


def test_unlisted_commerce_type_rejected(stub_logger):
    bad = "com.adobe.commerce.observer.catalog_product_save_after"
    err = validate_event_type(bad, stub_logger)
    assert err["error"]["body"]["error"] == f"Unauthorized event type: {bad}"
    logged = stub_logger.messages("error")[0]
    for allowed in ALLOWED_EVENT_TYPES:
        assert allowed in logged


def test_allow_list_is_read_only():
    assert isinstance(ALLOWED_EVENT_TYPES, tuple)
    assert len(ALLOWED_EVENT_TYPES) == 4
