"""Ecommerce rule table for track events.

Each `MappingRule` pairs one or more RudderStack event names with a fixed
AppsFlyer event name and a pure extractor that builds the rule-specific
values from the incoming properties. The table is closed and ordered; any
track event whose name is not in it goes through the default rule
(`default_event_name` + custom properties only).

Extractor contract:
    - Input: the raw property dict (never mutated)
    - Output: a fresh dict of AppsFlyer parameter keys
    - Missing or mistyped fields are omitted, never defaulted
    - An explicit null counts as missing, for untyped fields too

Product list handling differs by rule on purpose. `Product List Viewed` only
needs `product_id` per entry; the checkout family needs `product_id`,
`category` and `quantity` together, otherwise the entry is dropped from all
three parallel lists.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from . import constants as c
from .extractors import read_any, read_dict_list, read_str

__all__ = ["MappingRule", "ECOMMERCE_RULES", "find_rule", "default_event_name"]

Extractor = Callable[[Mapping[str, Any]], Dict[str, Any]]


@dataclass(frozen=True)
class MappingRule:
    input_names: Tuple[str, ...]
    output_name: str
    extract: Extractor


def _put(values: Dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        values[key] = value


def _no_fields(properties: Mapping[str, Any]) -> Dict[str, Any]:
    return {}


def _search(properties: Mapping[str, Any]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    _put(values, c.AF_PARAM_SEARCH_STRING, read_str(properties, "query"))
    return values


def _product(properties: Mapping[str, Any]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    _put(values, c.AF_PARAM_PRICE, read_any(properties, "price"))
    _put(values, c.AF_PARAM_CONTENT_ID, read_str(properties, "product_id"))
    _put(values, c.AF_PARAM_CONTENT_TYPE, read_str(properties, "category"))
    _put(values, c.AF_PARAM_CURRENCY, read_str(properties, "currency"))
    _put(values, c.AF_PARAM_QUANTITY, read_any(properties, "quantity"))
    return values


def _product_list(properties: Mapping[str, Any]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    _put(values, c.AF_PARAM_CONTENT_TYPE, read_str(properties, "category"))
    product_ids = [
        product_id
        for product_id in (read_str(p, "product_id") for p in read_dict_list(properties, "products"))
        if product_id is not None
    ]
    if product_ids:
        values[c.AF_PARAM_CONTENT_LIST] = product_ids
    return values


def _checkout(properties: Mapping[str, Any]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    _put(values, c.AF_PARAM_PRICE, read_any(properties, "total"))

    product_ids: list[str] = []
    categories: list[str] = []
    quantities: list[Any] = []
    for product in read_dict_list(properties, "products"):
        product_id = read_str(product, "product_id")
        category = read_str(product, "category")
        quantity = read_any(product, "quantity")
        if product_id is None or category is None or quantity is None:
            continue
        product_ids.append(product_id)
        categories.append(category)
        quantities.append(quantity)
    if product_ids:
        values[c.AF_PARAM_CONTENT_ID] = product_ids
        values[c.AF_PARAM_CONTENT_TYPE] = categories
        values[c.AF_PARAM_QUANTITY] = quantities

    _put(values, c.AF_PARAM_CURRENCY, read_str(properties, "currency"))
    order_id = read_str(properties, "order_id")
    _put(values, c.AF_PARAM_RECEIPT_ID, order_id)
    _put(values, c.AF_PARAM_ORDER_ID, order_id)
    _put(values, c.AF_PARAM_REVENUE, read_any(properties, "revenue"))
    return values


def _promotion(properties: Mapping[str, Any]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    creative = read_any(properties, "creative")
    _put(values, c.AF_PARAM_ADREV_AD_TYPE, creative)
    _put(values, c.AF_PARAM_AD_TYPE, creative)
    _put(values, c.AF_PARAM_CURRENCY, read_str(properties, "currency"))
    return values


def _share(properties: Mapping[str, Any]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    _put(values, c.AF_PARAM_DESCRIPTION, read_str(properties, "share_message"))
    return values


def _review(properties: Mapping[str, Any]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    _put(values, c.AF_PARAM_CONTENT_ID, read_str(properties, "product_id"))
    # rating is passed through untyped (int, float or string all accepted)
    _put(values, c.AF_PARAM_RATING_VALUE, read_any(properties, "rating"))
    return values


def _removal(properties: Mapping[str, Any]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    _put(values, c.AF_PARAM_CONTENT_ID, read_str(properties, "product_id"))
    _put(values, c.AF_PARAM_CONTENT_TYPE, read_str(properties, "category"))
    return values


ECOMMERCE_RULES: Tuple[MappingRule, ...] = (
    MappingRule((c.PRODUCTS_SEARCHED,), c.AF_SEARCH, _search),
    MappingRule((c.PRODUCT_VIEWED,), c.AF_CONTENT_VIEW, _product),
    MappingRule((c.PRODUCT_LIST_VIEWED,), c.AF_LIST_VIEW, _product_list),
    MappingRule((c.PRODUCT_ADDED_TO_WISHLIST,), c.AF_ADD_TO_WISHLIST, _product),
    MappingRule((c.PRODUCT_ADDED,), c.AF_ADD_TO_CART, _product),
    MappingRule((c.CHECKOUT_STARTED,), c.AF_INITIATED_CHECKOUT, _checkout),
    MappingRule((c.ORDER_COMPLETED,), c.AF_PURCHASE, _checkout),
    MappingRule((c.FIRST_PURCHASE,), c.AF_FIRST_PURCHASE, _checkout),
    MappingRule((c.PROMOTION_VIEWED,), c.AF_AD_VIEW, _promotion),
    MappingRule((c.PROMOTION_CLICKED,), c.AF_AD_CLICK, _promotion),
    MappingRule((c.PAYMENT_INFO_ENTERED,), c.AF_ADD_PAYMENT_INFO, _no_fields),
    MappingRule((c.PRODUCT_SHARED, c.CART_SHARED), c.AF_SHARE, _share),
    MappingRule((c.PRODUCT_REVIEWED,), c.AF_RATE, _review),
    MappingRule((c.PRODUCT_REMOVED,), c.AF_REMOVE_FROM_CART, _removal),
)

_RULES_BY_EVENT: Dict[str, MappingRule] = {
    name: rule for rule in ECOMMERCE_RULES for name in rule.input_names
}


def find_rule(event_name: str) -> Optional[MappingRule]:
    """Return the ecommerce rule for an exact (case-sensitive) event name."""
    return _RULES_BY_EVENT.get(event_name)


def default_event_name(event_name: str) -> str:
    """Name used for custom events: lower-cased, spaces replaced by `_`."""
    return event_name.lower().replace(" ", "_")
