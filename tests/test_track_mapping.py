from __future__ import annotations

import pytest

from rudder_appsflyer.mapper import ECOMMERCE_RULES, map_track_event
from rudder_appsflyer.models.rudderstack import TrackEvent


def _track(name: str, **properties):
    return map_track_event(TrackEvent(name=name, properties=properties))


def _order_properties():
    return {
        "order_id": "order_123",
        "total": 259.97,
        "revenue": 259.97,
        "currency": "USD",
        "products": [
            {"product_id": "prod1", "category": "electronics", "quantity": 1, "price": 199.99},
            {"product_id": "prod2", "category": "accessories", "quantity": 2, "price": 29.99},
        ],
    }


def test_products_searched_maps_query():
    mapped = _track("Products Searched", query="running shoes")
    assert mapped.name == "af_search"
    assert mapped.values == {"af_search_string": "running shoes"}


@pytest.mark.parametrize(
    "event_name,af_name",
    [
        ("Product Viewed", "af_content_view"),
        ("Product Added to Wishlist", "af_add_to_wishlist"),
        ("Product Added", "af_add_to_cart"),
    ],
)
def test_single_product_events(event_name, af_name):
    mapped = _track(
        event_name, product_id="123", category="shoes", price=99.99, currency="USD", quantity=1
    )
    assert mapped.name == af_name
    assert mapped.values == {
        "af_price": 99.99,
        "af_content_id": "123",
        "af_content_type": "shoes",
        "af_currency": "USD",
        "af_quantity": 1,
    }


def test_product_fields_with_wrong_type_are_omitted():
    # product_id must be a string; numeric ids are dropped rather than coerced
    mapped = _track("Product Viewed", product_id=123, category=["shoes"], price=None)
    assert mapped.values == {}


def test_order_completed_purchase_mapping():
    mapped = _track("Order Completed", **_order_properties())
    assert mapped.name == "af_purchase"
    assert mapped.values["af_price"] == 259.97
    assert mapped.values["af_currency"] == "USD"
    assert mapped.values["af_receipt_id"] == "order_123"
    assert mapped.values["af_order_id"] == "order_123"
    assert mapped.values["af_revenue"] == 259.97
    assert mapped.values["af_content_id"] == ["prod1", "prod2"]
    assert mapped.values["af_content_type"] == ["electronics", "accessories"]
    assert mapped.values["af_quantity"] == [1, 2]
    # reserved inputs are consumed, not passed through
    for key in ("total", "revenue", "currency", "order_id", "products"):
        assert key not in mapped.values


@pytest.mark.parametrize(
    "event_name,af_name",
    [("Checkout Started", "af_initiated_checkout"), ("first_purchase", "first_purchase")],
)
def test_checkout_family_shares_extraction(event_name, af_name):
    mapped = _track(event_name, **_order_properties())
    assert mapped.name == af_name
    assert mapped.values["af_content_id"] == ["prod1", "prod2"]


def test_checkout_skips_partial_products_entirely():
    mapped = _track(
        "Order Completed",
        products=[
            {"product_id": "p1", "category": "books", "quantity": 3},
            {"product_id": "p2", "category": "books"},  # no quantity
            {"product_id": "p3", "quantity": 1},  # no category
            {"category": "books", "quantity": 1},  # no product_id
            "not-a-product",
        ],
    )
    assert mapped.values["af_content_id"] == ["p1"]
    assert mapped.values["af_content_type"] == ["books"]
    assert mapped.values["af_quantity"] == [3]


def test_checkout_without_complete_products_writes_no_lists():
    mapped = _track("Checkout Started", products=[{"product_id": "p2"}], total=10)
    assert mapped.values == {"af_price": 10}


def test_checkout_product_with_null_quantity_is_dropped():
    mapped = _track(
        "Checkout Started",
        products=[
            {"product_id": "p1", "category": "books", "quantity": None},
            {"product_id": "p2", "category": "games", "quantity": 0},
        ],
    )
    assert mapped.values["af_content_id"] == ["p2"]
    assert mapped.values["af_content_type"] == ["games"]
    assert mapped.values["af_quantity"] == [0]


def test_null_untyped_fields_are_omitted():
    assert _track("Product Viewed", price=None, quantity=None).values == {}
    assert _track("Product Reviewed", product_id="p9", rating=None).values == {"af_content_id": "p9"}
    assert _track("Order Completed", total=None, revenue=None).values == {}
    assert _track("Promotion Clicked", creative=None).values == {}


def test_product_list_viewed_only_needs_product_id():
    mapped = _track(
        "Product List Viewed",
        category="deals",
        products=[{"product_id": "a"}, {"name": "no id"}, {"product_id": "b", "category": "x"}],
    )
    assert mapped.name == "af_list_view"
    assert mapped.values == {"af_content_type": "deals", "af_content_list": ["a", "b"]}


def test_product_list_viewed_with_non_list_products():
    mapped = _track("Product List Viewed", products={"product_id": "a"})
    assert "af_content_list" not in mapped.values


@pytest.mark.parametrize(
    "event_name,af_name", [("Promotion Viewed", "af_ad_view"), ("Promotion Clicked", "af_ad_click")]
)
def test_promotion_creative_written_under_both_keys(event_name, af_name):
    mapped = _track(event_name, creative="banner_ad", currency="USD")
    assert mapped.name == af_name
    assert mapped.values == {
        "af_adrev_ad_type": "banner_ad",
        "af_ad_type": "banner_ad",
        "af_currency": "USD",
    }


def test_payment_info_entered_passes_custom_properties_only():
    mapped = _track("Payment Info Entered", payment_method="card", currency="USD")
    assert mapped.name == "af_add_payment_info"
    assert mapped.values == {"payment_method": "card"}


@pytest.mark.parametrize("event_name", ["Product Shared", "Cart Shared"])
def test_share_events(event_name):
    mapped = _track(event_name, share_message="Check this out!", share_via="email")
    assert mapped.name == "af_share"
    assert mapped.values == {"af_description": "Check this out!", "share_via": "email"}


def test_product_reviewed_copies_rating_untyped():
    mapped = _track("Product Reviewed", product_id="p9", rating="4.5")
    assert mapped.name == "af_rate"
    assert mapped.values == {"af_content_id": "p9", "af_rating_value": "4.5"}


def test_product_removed():
    mapped = _track("Product Removed", product_id="p1", category="hats", price=5)
    assert mapped.name == "remove_from_cart"
    assert mapped.values == {"af_content_id": "p1", "af_content_type": "hats"}


def test_matching_is_case_sensitive():
    mapped = _track("product viewed", product_id="123")
    assert mapped.name == "product_viewed"
    assert "af_content_id" not in mapped.values


@pytest.mark.parametrize("name", ["", "   ", "\t"])
def test_blank_name_is_dropped(name):
    assert _track(name, custom="x") is None


def test_rule_table_covers_every_ecommerce_event():
    names = [name for rule in ECOMMERCE_RULES for name in rule.input_names]
    assert len(names) == len(set(names)) == 15


def test_mapping_is_deterministic():
    event = TrackEvent(name="Order Completed", properties=_order_properties())
    first = map_track_event(event)
    second = map_track_event(event)
    assert first.model_dump_json() == second.model_dump_json()
    # input is left untouched
    assert event.properties == _order_properties()
