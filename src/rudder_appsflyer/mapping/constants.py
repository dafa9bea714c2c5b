"""Event names and parameter keys on both sides of the mapping.

AppsFlyer values are the string forms of the SDK's `AFEvent*` and
`AFEventParam*` symbols. RudderStack names are the standard ecommerce event names,
matched case-sensitively.
"""
from __future__ import annotations

from typing import FrozenSet

# ---------------- RudderStack ecommerce event names -----------------
PRODUCTS_SEARCHED = "Products Searched"
PRODUCT_VIEWED = "Product Viewed"
PRODUCT_LIST_VIEWED = "Product List Viewed"
PRODUCT_ADDED_TO_WISHLIST = "Product Added to Wishlist"
PRODUCT_ADDED = "Product Added"
PRODUCT_REMOVED = "Product Removed"
CHECKOUT_STARTED = "Checkout Started"
ORDER_COMPLETED = "Order Completed"
FIRST_PURCHASE = "first_purchase"
PROMOTION_VIEWED = "Promotion Viewed"
PROMOTION_CLICKED = "Promotion Clicked"
PAYMENT_INFO_ENTERED = "Payment Info Entered"
PRODUCT_SHARED = "Product Shared"
CART_SHARED = "Cart Shared"
PRODUCT_REVIEWED = "Product Reviewed"

# ---------------- AppsFlyer event names -----------------
AF_SEARCH = "af_search"
AF_CONTENT_VIEW = "af_content_view"
AF_LIST_VIEW = "af_list_view"
AF_ADD_TO_WISHLIST = "af_add_to_wishlist"
AF_ADD_TO_CART = "af_add_to_cart"
AF_INITIATED_CHECKOUT = "af_initiated_checkout"
AF_PURCHASE = "af_purchase"
AF_AD_VIEW = "af_ad_view"
AF_AD_CLICK = "af_ad_click"
AF_ADD_PAYMENT_INFO = "af_add_payment_info"
AF_SHARE = "af_share"
AF_RATE = "af_rate"
# No SDK constant exists for these two; the literal names are sent as-is.
AF_REMOVE_FROM_CART = "remove_from_cart"
AF_FIRST_PURCHASE = FIRST_PURCHASE

# ---------------- AppsFlyer parameter keys -----------------
AF_PARAM_SEARCH_STRING = "af_search_string"
AF_PARAM_PRICE = "af_price"
AF_PARAM_CONTENT_ID = "af_content_id"
AF_PARAM_CONTENT_TYPE = "af_content_type"
AF_PARAM_CONTENT_LIST = "af_content_list"
AF_PARAM_CURRENCY = "af_currency"
AF_PARAM_QUANTITY = "af_quantity"
AF_PARAM_RECEIPT_ID = "af_receipt_id"
AF_PARAM_ORDER_ID = "af_order_id"
AF_PARAM_REVENUE = "af_revenue"
AF_PARAM_DESCRIPTION = "af_description"
AF_PARAM_RATING_VALUE = "af_rating_value"
# Promotion creative is written under both the ad-revenue key and the older
# ad-type key so either dashboard field picks it up.
AF_PARAM_ADREV_AD_TYPE = "af_adrev_ad_type"
AF_PARAM_AD_TYPE = "af_ad_type"

# ---------------- Screen naming -----------------
SCREEN_EVENT_NAME = "screen"
RICH_SCREEN_EVENT_TEMPLATE = "Viewed {name} Screen"
RICH_SCREEN_EVENT_FALLBACK = "Viewed Screen"

# Property keys never copied by the custom-property pass.
TRACK_RESERVED_KEYWORDS: FrozenSet[str] = frozenset(
    {
        "query",
        "price",
        "product_id",
        "category",
        "currency",
        "products",
        "quantity",
        "total",
        "revenue",
        "order_id",
        "share_message",
        "creative",
        "rating",
    }
)
